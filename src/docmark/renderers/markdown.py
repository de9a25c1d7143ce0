#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/renderers/markdown.py
"""Markdown rendering from the document tree.

This module provides the serializer that turns a document tree back into the
extended markdown the parsers read: standard headings, lists, fences, links
and emphasis, plus ``<mark>`` tags for annotated leaves and ``[change]`` tags
for tracked changes.

Each ``visit_*`` method returns the markdown for its node. Sibling blocks are
joined with a blank line; runs of inline nodes are concatenated.

"""

from __future__ import annotations

import logging

from docmark.ast.nodes import (
    INLINE_TYPES,
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    ListItem,
    MarkdownBlock,
    Node,
    Paragraph,
    Text,
    TrackedChange,
)
from docmark.ast.transforms import extract_text
from docmark.ast.visitors import NodeVisitor
from docmark.constants import CODE_FENCE
from docmark.exceptions import RenderingError
from docmark.options import MarkdownRendererOptions
from docmark.parsers.inline import escape_comment
from docmark.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render a document tree to extended markdown.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
    Basic usage:

        >>> doc = Document(children=[
        ...     Heading(depth=1, children=[Text("Title")]),
        ...     Paragraph(children=[Text("Some "), Text("bold", strong=True), Text(" text.")]),
        ... ])
        >>> MarkdownRenderer().render_to_string(doc)
        '# Title\\n\\nSome **bold** text.'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

    def render_to_string(self, tree: Document | Node | list[Node]) -> str:
        """Render a tree to a markdown string.

        Parameters
        ----------
        tree : Document, Node or list of Node
            A document, a single node, or a top-level node sequence

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        RenderingError
            If the tree contains an object that is not a node

        """
        if isinstance(tree, list):
            return self._render_blocks(tree)
        if not isinstance(tree, Node):
            raise RenderingError(f"Cannot render object of type {type(tree).__name__}", rendering_stage="dispatch")
        return tree.accept(self)

    def _render_node(self, node: Node) -> str:
        if not isinstance(node, Node):
            raise RenderingError(f"Cannot render object of type {type(node).__name__}", rendering_stage="dispatch")
        return node.accept(self)

    def _render_blocks(self, nodes: list[Node]) -> str:
        return BLOCK_SEPARATOR.join(self._render_node(node) for node in nodes)

    def _render_children(self, children: list[Node]) -> str:
        """Render children, concatenating inline runs and blank-line joining blocks."""
        if all(isinstance(child, INLINE_TYPES) for child in children):
            return "".join(self._render_node(child) for child in children)
        return self._render_blocks(children)

    def visit_document(self, node: Document) -> str:
        """Render a Document node."""
        return self._render_blocks(node.children)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node; whitespace-only content renders as an empty string."""
        content = self._render_children(node.children)
        if not content.strip():
            return ""
        return content

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node."""
        return "#" * node.depth + " " + self._render_children(node.children)

    def visit_list(self, node: List) -> str:
        """Render a List node.

        Ordered items are numbered from ``start`` (1 when unset) in source
        order; unordered items use the configured bullet.

        """
        start = node.start if node.start is not None else 1
        lines = []
        for index, item in enumerate(node.children):
            marker = f"{start + index}. " if node.ordered else f"{self.options.bullet_symbol} "
            lines.append(self._render_list_item(item, marker))
        return "\n".join(lines)

    def _render_list_item(self, item: Node, marker: str) -> str:
        prefix = marker
        if isinstance(item, ListItem) and item.checked is not None and self.options.render_task_checkboxes:
            prefix += "[x] " if item.checked else "[ ] "

        body = self._render_item_body(item)
        # Continuation lines sit under the item text so they stay inside the item.
        indent = " " * len(marker)
        lines = body.split("\n")
        for index in range(1, len(lines)):
            if lines[index]:
                lines[index] = indent + lines[index]
        return prefix + "\n".join(lines)

    def _render_item_body(self, item: Node) -> str:
        if not isinstance(item, ListItem):
            return self._render_node(item)
        children = item.children
        if all(isinstance(child, INLINE_TYPES) for child in children):
            return "".join(self._render_node(child) for child in children)
        return BLOCK_SEPARATOR.join(self._render_node(child) for child in children)

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem outside of a list (its content only)."""
        return self._render_item_body(node)

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node; the content is emitted verbatim."""
        return f"{CODE_FENCE}{node.lang or ''}\n{extract_text(node)}\n{CODE_FENCE}"

    def visit_link(self, node: Link) -> str:
        """Render a Link node."""
        content = self._render_children(node.children)
        if not self.options.render_links:
            return content
        return f"[{content}]({node.url})"

    def visit_markdown_block(self, node: MarkdownBlock) -> str:
        """Render a MarkdownBlock node (children only)."""
        return self._render_children(node.children)

    def visit_tracked_change(self, node: TrackedChange) -> str:
        """Render a TrackedChange node.

        The tag style always emits the ``insertion``/``deletion`` vocabulary,
        so a parsed ``create`` or ``update`` tag comes back as ``insertion``.

        """
        content = self._render_children(node.children)
        if self.options.tracked_change_style == "critic":
            if node.change_type == "deletion":
                return "{--" + content + "--}"
            return "{++" + content + "++}"

        attributes = f'type="{node.change_type}"'
        if self.options.include_change_ids:
            attributes += f' id="{node.change_id}"'
        return f"[change {attributes}]{content}[/change]"

    def visit_text(self, node: Text) -> str:
        """Render a Text leaf with its delimiters and at most one mark wrapper."""
        text = node.text
        if not text:
            return ""

        # Delimiters hug the non-whitespace core; flanking spaces stay outside.
        core = text.strip()
        if core:
            leading = text[: len(text) - len(text.lstrip())]
            trailing = text[len(text.rstrip()) :]
            if node.strong:
                core = f"**{core}**"
            if node.emphasis:
                core = f"*{core}*"
            if node.code:
                core = f"`{core}`"
            if node.strikethrough and self.options.render_strikethrough:
                core = f"~~{core}~~"
            text = f"{leading}{core}{trailing}"

        mark_type = node.mark_type
        if mark_type == "highlighted":
            return f'<mark type="highlighted">{text}</mark>'
        if mark_type == "read-only":
            return f'<mark type="read-only">{text}</mark>'
        if mark_type == "comment":
            attributes = f'type="comment" comment="{escape_comment(node.comment or "")}"'
            if node.is_instruction_to_ai:
                attributes += ' ai-instructions="yes"'
            return f"<mark {attributes}>{text}</mark>"
        return text
