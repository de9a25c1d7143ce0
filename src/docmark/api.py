#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/api.py
"""Boundary functions for parsing, serializing and splitting.

These are the calls a host editor makes: ``parse`` on load and on every
external change to the text buffer, ``serialize`` on every tree edit, and
``split_at`` when the user splits a block at the cursor.

Examples
--------
    >>> from docmark import parse, serialize
    >>> tree = parse("# Title\\n\\nSome **bold** text.")
    >>> serialize(tree)
    '# Title\\n\\nSome **bold** text.'

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from docmark.ast.nodes import Document, Node, Paragraph, Text
from docmark.ast.splitting import BlockSplit, BlockSplitter, CursorPosition, Selection
from docmark.ast.transforms import normalize_tree
from docmark.exceptions import ValidationError
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.parsers.base import BaseParser
from docmark.parsers.lines import LineMarkdownParser
from docmark.parsers.markdown import MarkdownToTreeConverter
from docmark.parsers.scanner import ParseStrategy, detect_strategy
from docmark.parsers.tracked_changes import TrackedChangeParser
from docmark.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def _empty_document(strategy: ParseStrategy) -> Document:
    return Document(children=[Paragraph(children=[Text(text="")])], metadata={"strategy": strategy.value})


def _create_parser(strategy: ParseStrategy, options: MarkdownParserOptions) -> BaseParser:
    if strategy is ParseStrategy.TRACKED_CHANGES:
        return TrackedChangeParser(options)
    if strategy is ParseStrategy.TEXT_MARKS:
        return LineMarkdownParser(options)
    return MarkdownToTreeConverter(options)


def parse(markdown: str, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse extended markdown into a document tree.

    The input is scanned for change tags first, then mark tags; the first
    construct found picks the parser, and plain markdown goes through the
    standard converter. Blank input short-circuits to a single empty
    paragraph.

    Parameters
    ----------
    markdown : str
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Parsed tree; ``metadata["strategy"]`` names the parser used

    Raises
    ------
    ValidationError
        If ``markdown`` is not a string
    ParsingError
        If the standard converter fails

    """
    if not isinstance(markdown, str):
        raise ValidationError(
            f"markdown must be a string, got {type(markdown).__name__}",
            parameter_name="markdown",
            parameter_value=markdown,
        )
    options = options or MarkdownParserOptions()

    strategy = detect_strategy(markdown)
    if strategy is ParseStrategy.EMPTY:
        return _empty_document(strategy)

    document = _create_parser(strategy, options).parse(markdown)
    if options.normalize:
        document = normalize_tree(document)
    document.metadata["strategy"] = strategy.value
    return document


def parse_with_fallback(markdown: str, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse markdown, substituting the raw text if parsing fails.

    Parameters
    ----------
    markdown : str
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Parsed tree, or one paragraph holding ``markdown`` verbatim when a
        parser raised

    """
    if not isinstance(markdown, str):
        raise ValidationError(
            f"markdown must be a string, got {type(markdown).__name__}",
            parameter_name="markdown",
            parameter_value=markdown,
        )
    try:
        return parse(markdown, options)
    except Exception as e:
        logger.warning(f"Failed to parse markdown, using raw text instead: {e}")
        return Document(children=[Paragraph(children=[Text(text=markdown)])], metadata={"strategy": "fallback"})


def serialize(
    tree: Union[Document, Node, Sequence[Node]],
    options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Serialize a document tree to extended markdown.

    Parameters
    ----------
    tree : Document, Node or sequence of Node
        Tree to serialize
    options : MarkdownRendererOptions or None, default = None
        Rendering configuration

    Returns
    -------
    str
        Markdown text

    """
    if isinstance(tree, (list, tuple)):
        tree = list(tree)
    return MarkdownRenderer(options).render_to_string(tree)  # type: ignore[arg-type]


def split_at(
    tree: Union[Document, Sequence[Node]],
    position: Union[CursorPosition, Selection],
    options: Optional[MarkdownRendererOptions] = None,
) -> Optional[BlockSplit]:
    """Split the markdown block enclosing a cursor.

    Parameters
    ----------
    tree : Document or sequence of Node
        Tree holding ``MarkdownBlock`` nodes; not modified
    position : CursorPosition or Selection
        Cursor to split at
    options : MarkdownRendererOptions or None, default = None
        Rendering configuration for the two halves

    Returns
    -------
    BlockSplit or None
        The block id with the markdown before and after the cursor, or None
        when the cursor is not inside a markdown block

    Raises
    ------
    SplitError
        If the cursor path ends on a node that is not a text leaf

    """
    return BlockSplitter(MarkdownRenderer(options)).split(tree, position)


__all__ = ["parse", "parse_with_fallback", "serialize", "split_at"]
