#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

This module provides the visitor base class used by the markdown serializer
and the normalizer passes. Each node kind dispatches to its own ``visit_*``
method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
)


class NodeVisitor(ABC):
    """Abstract base class for tree node visitors.

    Subclasses implement one ``visit_*`` method per node kind. Visit methods
    accept a node and return Any (None for side-effect visitors, or a value
    for transforming visitors).

    Examples
    --------
    Simple visitor that counts leaves:

        >>> class LeafCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     def generic_visit(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     visit_document = visit_paragraph = visit_heading = generic_visit
        ...     visit_list = visit_list_item = visit_code_block = generic_visit
        ...     visit_link = visit_markdown_block = visit_tracked_change = generic_visit

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_markdown_block(self, node: MarkdownBlock) -> Any:
        """Visit a MarkdownBlock node."""
        pass

    @abstractmethod
    def visit_tracked_change(self, node: TrackedChange) -> Any:
        """Visit a TrackedChange node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text leaf.

        Parameters
        ----------
        node : Text
            The text run to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
