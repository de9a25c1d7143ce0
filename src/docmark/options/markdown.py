#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/options/markdown.py
"""Configuration options for markdown parsing and serialization.

This module defines options for converting markdown (with ``<mark>`` tags and
``[change]`` blocks) into a document tree and for serializing a tree back.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docmark.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CHANGE_ID_PREFIX,
    DEFAULT_INCLUDE_CHANGE_IDS,
    DEFAULT_INLINE_FORMATTING_FALLBACK,
    DEFAULT_NORMALIZE,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TASK_LISTS,
    DEFAULT_RENDER_LINKS,
    DEFAULT_RENDER_STRIKETHROUGH,
    DEFAULT_RENDER_TASK_CHECKBOXES,
    DEFAULT_TRACKED_CHANGE_STYLE,
    BulletSymbol,
    TrackedChangeStyle,
)
from docmark.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for markdown-to-tree parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether the standard parser recognizes ``~~text~~``.
    parse_task_lists : bool, default True
        Whether ``- [ ]`` / ``- [x]`` items become checked list items.
    inline_formatting_fallback : bool, default True
        Whether to re-scan standard-parser leaves for leftover ``**``, ``*``
        and backtick delimiters.
    normalize : bool, default True
        Whether to fill empty elements and flatten single-paragraph list items.
    change_id_prefix : str, default "change"
        Prefix for generated tracked-change identifiers.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "cli_name": "no-parse-strikethrough"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "cli_name": "no-parse-task-lists"},
    )
    inline_formatting_fallback: bool = field(
        default=DEFAULT_INLINE_FORMATTING_FALLBACK,
        metadata={"help": "Re-scan parsed text for leftover bold/italic/code delimiters"},
    )
    normalize: bool = field(
        default=DEFAULT_NORMALIZE,
        metadata={"help": "Fill empty elements and flatten single-paragraph list items"},
    )
    change_id_prefix: str = field(
        default=DEFAULT_CHANGE_ID_PREFIX,
        metadata={"help": "Prefix for generated tracked-change identifiers"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``change_id_prefix`` is empty.

        """
        super().__post_init__()
        if not self.change_id_prefix:
            raise ValueError("change_id_prefix must be a non-empty string")


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-markdown serialization.

    Parameters
    ----------
    bullet_symbol : {"-", "*", "+"}, default "-"
        Marker for unordered list items.
    render_task_checkboxes : bool, default True
        Emit ``[x] `` / ``[ ] `` for list items with a checked state.
    render_strikethrough : bool, default True
        Wrap strikethrough leaves in ``~~``.
    render_links : bool, default True
        Render links as ``[text](url)``; otherwise emit the link text only.
    include_change_ids : bool, default False
        Add ``id="..."`` to serialized change tags.
    tracked_change_style : {"tag", "critic"}, default "tag"
        ``tag`` emits ``[change type="..."]...[/change]``; ``critic`` emits
        CriticMarkup (``{++text++}`` / ``{--text--}``).

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"]},
    )
    render_task_checkboxes: bool = field(
        default=DEFAULT_RENDER_TASK_CHECKBOXES,
        metadata={"help": "Render task list checkboxes for checked/unchecked items"},
    )
    render_strikethrough: bool = field(
        default=DEFAULT_RENDER_STRIKETHROUGH,
        metadata={"help": "Render strikethrough text as ~~text~~"},
    )
    render_links: bool = field(
        default=DEFAULT_RENDER_LINKS,
        metadata={"help": "Render links as [text](url) instead of plain text"},
    )
    include_change_ids: bool = field(
        default=DEFAULT_INCLUDE_CHANGE_IDS,
        metadata={"help": "Include change ids in serialized change tags"},
    )
    tracked_change_style: TrackedChangeStyle = field(
        default=DEFAULT_TRACKED_CHANGE_STYLE,
        metadata={"help": "Tracked change output style", "choices": ["tag", "critic"]},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``bullet_symbol`` or ``tracked_change_style`` is not supported.

        """
        super().__post_init__()
        if self.bullet_symbol not in ("-", "*", "+"):
            raise ValueError(f"bullet_symbol must be one of '-', '*', '+', got {self.bullet_symbol!r}")
        if self.tracked_change_style not in ("tag", "critic"):
            raise ValueError(f"tracked_change_style must be 'tag' or 'critic', got {self.tracked_change_style!r}")
