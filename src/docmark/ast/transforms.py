#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/transforms.py
"""Tree transformation utilities and the normalizer passes.

This module provides the base transformer used to build modified copies of a
tree, plus the two normalization passes that every parse result goes through:

1. ``FillEmptyChildren`` gives every element with no children a single empty
   text leaf, so editors always have a place to put the cursor.
2. ``FlattenListItemParagraphs`` unwraps a list item whose only child is a
   paragraph, so the item holds the paragraph's leaves directly.

Both passes are pure and idempotent; ``normalize_tree`` applies them in order.

"""

from __future__ import annotations

import copy
from typing import overload

from docmark.ast.nodes import (
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
    get_node_children,
    is_element,
    replace_node_children,
)
from docmark.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming tree nodes.

    Subclasses implement visit_* methods that return modified nodes or None
    to remove nodes. The transformer creates a new tree with the
    transformations applied; the input is never mutated.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(text=node.text.upper())
    >>>
    >>> transformer = UppercaseTransformer()
    >>> new_doc = transformer.transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform a tree node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def transform_nodes(self, nodes: list[Node]) -> list[Node]:
        """Transform a top-level node sequence."""
        return self._transform_children(nodes)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes.

        Parameters
        ----------
        children : list of Node
            Children to transform

        Returns
        -------
        list of Node
            Transformed children (filtered for None values)

        """
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform nodes generically using traversal helpers.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Transformed node with children replaced

        Notes
        -----
        This method uses get_node_children and replace_node_children helpers
        to minimize boilerplate in visitor implementations.

        """
        if not is_element(node):
            return copy.copy(node)

        transformed_children = self._transform_children(get_node_children(node))
        return replace_node_children(node, transformed_children)

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_link(self, node: Link) -> Link:
        """Transform a Link node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_markdown_block(self, node: MarkdownBlock) -> MarkdownBlock:
        """Transform a MarkdownBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_tracked_change(self, node: TrackedChange) -> TrackedChange:
        """Transform a TrackedChange node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text:
        """Transform a Text leaf."""
        return copy.copy(node)


class FillEmptyChildren(NodeTransformer):
    """Give every element without children a single empty text leaf.

    Runs bottom-up, so an element whose children were all removed by an
    earlier pass is filled as well.

    """

    def _generic_transform(self, node: Node) -> Node:
        if not is_element(node):
            return copy.copy(node)

        children = self._transform_children(get_node_children(node))
        if not children:
            children = [Text(text="")]
        return replace_node_children(node, children)

    def visit_document(self, node: Document) -> Document:
        # The root itself is left alone; an empty input is handled by the parser.
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())


class FlattenListItemParagraphs(NodeTransformer):
    """Replace a list item's sole paragraph child with that paragraph's children.

    Items with several children, or whose only child is not a paragraph, are
    left untouched. A paragraph nested directly in the sole paragraph is
    unwrapped as well, so a second pass never changes the result.

    """

    def visit_list_item(self, node: ListItem) -> ListItem:
        children = self._transform_children(node.children)
        while len(children) == 1 and isinstance(children[0], Paragraph):
            children = list(children[0].children)
        return ListItem(children=children, checked=node.checked)


@overload
def normalize_tree(tree: Document) -> Document: ...


@overload
def normalize_tree(tree: list[Node]) -> list[Node]: ...


def normalize_tree(tree: Document | list[Node]) -> Document | list[Node]:
    """Apply the fill-empty and flatten-list-item passes in order.

    Parameters
    ----------
    tree : Document or list of Node
        Tree to normalize

    Returns
    -------
    Document or list of Node
        Normalized copy, of the same shape as the input

    Examples
    --------
    >>> nodes = [List(ordered=False, children=[ListItem(children=[Paragraph(children=[Text("a")])])])]
    >>> normalize_tree(nodes)[0].children[0].children
    [Text(text='a', ...)]

    """
    passes: tuple[NodeTransformer, ...] = (FillEmptyChildren(), FlattenListItemParagraphs())
    if isinstance(tree, Document):
        result = tree
        for transformer in passes:
            result = transformer.transform(result)  # type: ignore[assignment]
        return result

    nodes = list(tree)
    for transformer in passes:
        nodes = transformer.transform_nodes(nodes)
    return nodes


def extract_text(node: Node | list[Node]) -> str:
    """Concatenate the text of every leaf under ``node``.

    Parameters
    ----------
    node : Node or list of Node
        Node or node sequence to read

    Returns
    -------
    str
        Plain text with all formatting dropped

    """
    if isinstance(node, list):
        return "".join(extract_text(child) for child in node)
    if isinstance(node, Text):
        return node.text
    return "".join(extract_text(child) for child in get_node_children(node))


__all__ = [
    "NodeTransformer",
    "FillEmptyChildren",
    "FlattenListItemParagraphs",
    "normalize_tree",
    "extract_text",
]
