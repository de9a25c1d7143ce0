#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/tracked_changes.py
"""Parser for markdown containing ``[change]`` tracked-change blocks.

Text outside and inside each change tag is plain markdown and is handed to
the standard converter; each tag's content is wrapped in a ``TrackedChange``
node.

"""

from __future__ import annotations

import logging

from docmark.ast.nodes import Document, Node, Paragraph, Text, TrackedChange, generate_change_id
from docmark.options import MarkdownParserOptions
from docmark.parsers.base import BaseParser
from docmark.parsers.markdown import MarkdownToTreeConverter
from docmark.parsers.scanner import CHANGE_PATTERN, DELETION_TAG_TYPES

logger = logging.getLogger(__name__)


class TrackedChangeParser(BaseParser):
    """Split markdown around change tags and wrap each tag's content.

    Tag types ``delete`` and ``deletion`` map to ``deletion``; ``create``,
    ``update`` and ``insertion`` map to ``insertion``. A tag without an
    ``id`` attribute receives a generated identifier.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration, shared with the standard converter
    fragment_parser : MarkdownToTreeConverter or None, default = None
        Parser for the text around and inside the tags

    Examples
    --------
    >>> doc = TrackedChangeParser().parse('[change type="delete"]removed[/change]')
    >>> doc.children[0].change_type
    'deletion'

    """

    def __init__(
        self,
        options: MarkdownParserOptions | None = None,
        fragment_parser: MarkdownToTreeConverter | None = None,
    ):
        """Initialize the parser with options and an optional fragment parser."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "tracked_changes")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.fragment_parser = fragment_parser or MarkdownToTreeConverter(options)

    def parse(self, markdown: str) -> Document:
        """Parse markdown containing change tags.

        Parameters
        ----------
        markdown : str
            Markdown source

        Returns
        -------
        Document
            Blocks in source order; never empty

        """
        nodes: list[Node] = []
        cursor = 0
        change_count = 0

        for match in CHANGE_PATTERN.finditer(markdown):
            change_count += 1
            nodes.extend(self._parse_fragment(markdown[cursor : match.start()]))

            tag_type = match.group("type")
            change_type = "deletion" if tag_type in DELETION_TAG_TYPES else "insertion"
            change_id = match.group("id") or generate_change_id(self.options.change_id_prefix)
            content = match.group("content")
            nodes.append(
                TrackedChange(
                    change_id=change_id,
                    change_type=change_type,
                    children=self._parse_fragment(content),
                )
            )
            cursor = match.end()

        if change_count == 0:
            logger.debug("No change tags found; parsing as standard markdown")
            return self.fragment_parser.parse(markdown)

        nodes.extend(self._parse_fragment(markdown[cursor:]))
        logger.debug(f"Parsed {change_count} tracked changes into {len(nodes)} blocks")

        if not nodes:
            nodes.append(Paragraph(children=[Text(text="")]))
        return Document(children=nodes)

    def _parse_fragment(self, fragment: str) -> list[Node]:
        if not fragment.strip():
            return []
        return self.fragment_parser.parse(fragment).children
