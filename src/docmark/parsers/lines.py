#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/lines.py
"""Line-oriented markdown parser used when the input contains mark tags.

Standard markdown parsers treat ``<mark>`` as raw HTML and lose its
attributes, so text containing marks is parsed here instead. The grammar is
deliberately small: blank-line separated blocks, fenced code, ATX headings,
single-line list items and paragraphs. Inline content is split into mark
leaves and formatted runs.

"""

from __future__ import annotations

import logging
import re

from docmark.ast.nodes import CodeBlock, Document, Heading, List, ListItem, Node, Paragraph, Text
from docmark.constants import CODE_FENCE
from docmark.options import MarkdownParserOptions
from docmark.parsers.base import BaseParser
from docmark.parsers.inline import build_mark_leaf, parse_formatted_text
from docmark.parsers.scanner import find_marks

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR_RE = re.compile(r"(\n\s*\n)")
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_LIST_ITEM_RE = re.compile(r"^(\s*)([-*+]|\d+\.)\s+(.*)$")
_TASK_PREFIX_RE = re.compile(r"^\[([ xX])\]\s+(.*)$")


class LineMarkdownParser(BaseParser):
    """Parse markdown line by line, keeping ``<mark>`` annotations.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration; only ``parse_task_lists`` affects this parser

    Examples
    --------
    >>> doc = LineMarkdownParser().parse('# T\\n\\nsee <mark type="highlighted">this</mark>')
    >>> [type(node).__name__ for node in doc.children]
    ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the line parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "lines")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def parse(self, markdown: str) -> Document:
        """Parse markdown into a document tree.

        Parameters
        ----------
        markdown : str
            Markdown source, typically containing mark tags

        Returns
        -------
        Document
            Parsed blocks; never empty

        """
        nodes: list[Node] = []
        for block in self._split_blocks(markdown):
            if not block.strip():
                nodes.append(Paragraph(children=[Text(text="")]))
                continue
            nodes.extend(self._parse_block(block.strip().split("\n")))

        if not nodes:
            nodes.append(Paragraph(children=[Text(text="")]))
        logger.debug(f"Line parser produced {len(nodes)} blocks")
        return Document(children=nodes)

    def _split_blocks(self, markdown: str) -> list[str]:
        """Split on blank lines, keeping an open code fence in one block."""
        parts = _BLOCK_SEPARATOR_RE.split(markdown)
        blocks = []
        index = 0
        while index < len(parts):
            block = parts[index]
            while self._has_open_fence(block) and index + 2 < len(parts):
                block += parts[index + 1] + parts[index + 2]
                index += 2
            blocks.append(block)
            index += 2
        return blocks

    @staticmethod
    def _has_open_fence(block: str) -> bool:
        is_open = False
        for line in block.split("\n"):
            if line.strip().startswith(CODE_FENCE):
                is_open = not is_open
        return is_open

    def _parse_block(self, lines: list[str]) -> list[Node]:
        nodes: list[Node] = []
        index = 0
        while index < len(lines):
            line = lines[index]
            trimmed = line.strip()

            if trimmed.startswith(CODE_FENCE):
                lang = trimmed[len(CODE_FENCE) :].strip()
                code_lines = []
                index += 1
                # An unterminated fence swallows the rest of the block.
                while index < len(lines) and not lines[index].strip().startswith(CODE_FENCE):
                    code_lines.append(lines[index])
                    index += 1
                index += 1
                nodes.append(CodeBlock(children=[Text(text="\n".join(code_lines))], lang=lang or None))
                continue

            nodes.append(self._parse_line(line))
            index += 1
        return nodes

    def _parse_line(self, line: str) -> Node:
        heading_match = _HEADING_RE.match(line)
        if heading_match:
            return Heading(
                depth=len(heading_match.group(1)),
                children=self._parse_inline(heading_match.group(2)),
            )

        list_match = _LIST_ITEM_RE.match(line)
        if list_match:
            return self._parse_list_line(list_match.group(2), list_match.group(3))

        if not line.strip():
            return Paragraph(children=[Text(text="")])
        return Paragraph(children=self._parse_inline(line))

    def _parse_list_line(self, marker: str, content: str) -> List:
        """Build a one-item list for a single list-marker line."""
        checked = None
        if self.options.parse_task_lists:
            task_match = _TASK_PREFIX_RE.match(content)
            if task_match:
                checked = task_match.group(1) != " "
                content = task_match.group(2)

        ordered = marker.endswith(".")
        start = None
        if ordered:
            number = int(marker[:-1])
            start = number if number != 1 else None

        item = ListItem(children=self._parse_inline(content), checked=checked)
        return List(ordered=ordered, children=[item], start=start)

    def _parse_inline(self, text: str) -> list[Node]:
        """Split a line into mark leaves and formatted runs."""
        children: list[Node] = []
        last = 0
        for match in find_marks(text):
            if match.start() > last:
                children.extend(parse_formatted_text(text[last : match.start()]))
            children.append(build_mark_leaf(match))
            last = match.end()
        if last < len(text):
            children.extend(parse_formatted_text(text[last:]))

        if not children:
            children.append(Text(text=text))
        return children
