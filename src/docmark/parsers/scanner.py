#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/scanner.py
"""Detection of custom markup in raw markdown.

The editor extends markdown with two constructs that standard parsers do not
understand:

- ``<mark type="highlighted|read-only|comment" [comment="..."] [ai-instructions="yes"]>text</mark>``
- ``[change type="create|update|delete" [id="..."]]content[/change]``

This module holds the patterns for both, picks the parse strategy for an
input, and lists the marked spans of a raw string.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from docmark.parsers.inline import unescape_comment

logger = logging.getLogger(__name__)

# An unterminated span runs to the end of the input.
MARK_PATTERN = re.compile(
    r'<mark type="(?P<type>highlighted|read-only|comment)"'
    r'(?:\s+comment="(?P<comment>[^"]*?)")?'
    r'(?:\s+ai-instructions="(?P<ai>[^"]*?)")?>'
    r"(?P<content>.*?)(?:</mark>|\Z)",
    re.DOTALL,
)

CHANGE_PATTERN = re.compile(
    r"\[change\s+type=[\"']?(?P<type>create|update|delete|insertion|deletion)[\"']?"
    r"(?:\s+id=[\"']?(?P<id>[^\"'\]]+)[\"']?)?\]"
    r"(?P<content>.*?)(?:\[/change\]|\Z)",
    re.DOTALL,
)

DELETION_TAG_TYPES = frozenset({"delete", "deletion"})


class ParseStrategy(str, Enum):
    """Parse strategy chosen for an input, in priority order."""

    EMPTY = "empty"
    TRACKED_CHANGES = "tracked_changes"
    TEXT_MARKS = "text_marks"
    STANDARD = "standard"


@dataclass(frozen=True)
class MarkedSpan:
    """A ``<mark>`` span found in raw markdown.

    Parameters
    ----------
    text : str
        Inner text, formatting delimiters kept verbatim
    mark_type : str
        ``highlighted``, ``read-only`` or ``comment``
    comment : str or None
        Unescaped comment attribute, if present
    is_instruction_to_ai : bool
        True when the tag carries ``ai-instructions="yes"``
    start : int
        Offset of the opening tag in the source
    end : int
        Offset just past the closing tag (or end of input)

    """

    text: str
    mark_type: str
    comment: Optional[str]
    is_instruction_to_ai: bool
    start: int
    end: int


def has_tracked_changes(markdown: str) -> bool:
    """Return True if ``markdown`` contains an opening change tag."""
    return CHANGE_PATTERN.search(markdown) is not None


def has_text_marks(markdown: str) -> bool:
    """Return True if ``markdown`` contains an opening mark tag."""
    return MARK_PATTERN.search(markdown) is not None


def detect_strategy(markdown: str) -> ParseStrategy:
    """Choose how ``markdown`` should be parsed.

    Parameters
    ----------
    markdown : str
        Raw markdown

    Returns
    -------
    ParseStrategy
        ``EMPTY`` for blank input, otherwise the first of tracked changes,
        text marks or standard markdown that applies

    """
    if not markdown.strip():
        strategy = ParseStrategy.EMPTY
    elif has_tracked_changes(markdown):
        strategy = ParseStrategy.TRACKED_CHANGES
    elif has_text_marks(markdown):
        strategy = ParseStrategy.TEXT_MARKS
    else:
        strategy = ParseStrategy.STANDARD
    logger.debug(f"Selected parse strategy: {strategy.value}")
    return strategy


def find_marks(text: str) -> Iterator[re.Match[str]]:
    """Iterate over the mark tags in ``text``, left to right."""
    return MARK_PATTERN.finditer(text)


def extract_marked_text(markdown: str, mark_type: Optional[str] = None) -> list[MarkedSpan]:
    """List every mark span in raw markdown.

    Parameters
    ----------
    markdown : str
        Raw markdown
    mark_type : str or None, default = None
        Only return spans of this type

    Returns
    -------
    list of MarkedSpan
        Spans in source order

    Examples
    --------
    >>> spans = extract_marked_text('a <mark type="highlighted">b</mark>')
    >>> spans[0].text, spans[0].mark_type
    ('b', 'highlighted')

    """
    spans = []
    for match in find_marks(markdown):
        if mark_type is not None and match.group("type") != mark_type:
            continue
        comment = match.group("comment")
        spans.append(
            MarkedSpan(
                text=match.group("content"),
                mark_type=match.group("type"),
                comment=unescape_comment(comment) if comment is not None else None,
                is_instruction_to_ai=match.group("ai") == "yes",
                start=match.start(),
                end=match.end(),
            )
        )
    return spans
