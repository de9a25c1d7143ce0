#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/markdown.py
"""Standard markdown to document tree converter.

This module converts plain markdown (no mark tags, no change tags) into the
document tree using mistune for parsing. Mistune's token stream nests inline
formatting (``strong`` inside ``emphasis`` and so on); the tree instead
flattens it into leaves with attribute sets, so the inline walk carries the
active attributes down and emits one leaf per text run.

A post-pass then re-scans the leaves for ``**``, ``*`` and backtick
delimiters that the token transform left behind.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from docmark.ast.nodes import (
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Text,
)
from docmark.ast.transforms import NodeTransformer
from docmark.constants import DEPS_MARKDOWN
from docmark.exceptions import ParsingError
from docmark.options import MarkdownParserOptions
from docmark.parsers.base import BaseParser
from docmark.parsers.inline import apply_inline_formatting, has_inline_delimiters
from docmark.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class InlineFormattingFallback(NodeTransformer):
    """Strip leftover bold, italic and code delimiters from leaves.

    Code block contents are verbatim and are not scanned.

    """

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        return replace(node, children=list(node.children))

    def visit_text(self, node: Text) -> Text:
        if not has_inline_delimiters(node.text):
            return replace(node)
        text, attrs = apply_inline_formatting(node.text)
        return replace(node, text=text, **attrs)


class MarkdownToTreeConverter(BaseParser):
    """Convert markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownToTreeConverter()
        >>> doc = parser.parse("# Title\\n\\nSome **bold** text.")

    With options:

        >>> options = MarkdownParserOptions(parse_task_lists=False)
        >>> parser = MarkdownToTreeConverter(options)
        >>> doc = parser.parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, markdown: str) -> Document:
        """Parse markdown into a document tree.

        Parameters
        ----------
        markdown : str
            Markdown source

        Returns
        -------
        Document
            Parsed blocks

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown_parser = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            tokens, _state = markdown_parser.parse(markdown)
        except Exception as e:
            raise ParsingError(f"Failed to parse markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        if self.options.inline_formatting_fallback:
            children = InlineFormattingFallback().transform_nodes(children)

        if not children:
            children = [Paragraph(children=[Text(text="")])]

        logger.debug(f"Standard parser produced {len(children)} blocks")
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into tree nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            Block nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting node(s)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "block_quote":
            # No quote node in the tree; keep the quoted blocks in place.
            return self._process_tokens(token.get("children", []))
        elif token_type == "thematic_break":
            return Paragraph(children=[Text(text="---")])
        elif token_type == "block_html":
            return Paragraph(children=[Text(text=token.get("raw", "").rstrip("\n"))])
        elif token_type == "blank_line":
            return None

        children = token.get("children")
        if isinstance(children, list):
            logger.debug(f"Unhandled block token {token_type!r}; keeping its children")
            return self._process_tokens(children)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        return Heading(depth=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block node holding one leaf

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        lang = None
        if info_string and info_string.strip():
            lang = info_string.strip().split(maxsplit=1)[0]

        return CodeBlock(children=[Text(text=code_content)], lang=lang)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'attrs' (ordered, start)

        Returns
        -------
        List
            List node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start")
        if not ordered or start == 1:
            start = None

        children = token.get("children", [])
        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]
        return List(ordered=ordered, children=items, start=start)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process a list_item or task_list_item token."""
        attrs = token.get("attrs", {})
        checked = None
        if isinstance(attrs, dict) and "checked" in attrs:
            checked = bool(attrs["checked"])
        return ListItem(children=self._process_tokens(token.get("children", [])), checked=checked)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]], marks: dict[str, bool] | None = None) -> list[Node]:
        """Process inline tokens into leaves and links.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries
        marks : dict or None, default = None
            Attributes inherited from enclosing strong/emphasis/strikethrough tokens

        Returns
        -------
        list of Node
            Leaves and links, adjacent leaves with equal attributes merged

        """
        marks = marks or {}
        nodes: list[Node] = []

        for token in tokens:
            token_type = token.get("type", "")

            if token_type == "text":
                nodes.append(Text(text=token.get("raw", ""), **marks))
            elif token_type == "strong":
                nodes.extend(self._process_inline_tokens(token.get("children", []), {**marks, "strong": True}))
            elif token_type == "emphasis":
                nodes.extend(self._process_inline_tokens(token.get("children", []), {**marks, "emphasis": True}))
            elif token_type == "strikethrough":
                nodes.extend(
                    self._process_inline_tokens(token.get("children", []), {**marks, "strikethrough": True})
                )
            elif token_type == "codespan":
                nodes.append(Text(text=token.get("raw", ""), **{**marks, "code": True}))
            elif token_type == "link":
                attrs = token.get("attrs", {})
                url = attrs.get("url", "") if isinstance(attrs, dict) else ""
                nodes.append(Link(url=url, children=self._process_inline_tokens(token.get("children", []), marks)))
            elif token_type == "image":
                nodes.append(Text(text=self._image_source(token), **marks))
            elif token_type in ("softbreak", "linebreak"):
                nodes.append(Text(text="\n", **marks))
            elif token_type == "inline_html":
                nodes.append(Text(text=token.get("raw", ""), **marks))
            elif isinstance(token.get("children"), list):
                nodes.extend(self._process_inline_tokens(token["children"], marks))
            elif token.get("raw"):
                nodes.append(Text(text=token["raw"], **marks))

        return self._merge_adjacent_leaves(nodes)

    @staticmethod
    def _image_source(token: dict[str, Any]) -> str:
        """Rebuild the ``![alt](url)`` source of an image token; the tree has no image node."""
        attrs = token.get("attrs", {})
        url = attrs.get("url", "") if isinstance(attrs, dict) else ""
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        return f"![{alt_text}]({url})"

    @staticmethod
    def _merge_adjacent_leaves(nodes: list[Node]) -> list[Node]:
        merged: list[Node] = []
        for node in nodes:
            previous = merged[-1] if merged else None
            if isinstance(node, Text) and isinstance(previous, Text) and previous.same_attributes(node):
                merged[-1] = replace(previous, text=previous.text + node.text)
            else:
                merged.append(node)
        return merged
