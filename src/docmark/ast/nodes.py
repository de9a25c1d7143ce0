#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/nodes.py
"""Node classes for the rich-document tree.

This module defines the closed set of node kinds used by the editable view.
Every element node owns an ordered ``children`` list; leaves are ``Text``
runs carrying independent formatting and annotation attributes.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Element nodes:
    - Document (root), Paragraph, Heading, List, ListItem, CodeBlock
    - Link, MarkdownBlock, TrackedChange

Leaf nodes:
    - Text (a text run with strong/emphasis/code/... attributes)

Nested formatting is never represented by nesting: a bold word inside an
italic sentence becomes three adjacent ``Text`` leaves with different
attribute sets.

"""

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Literal, Optional

ChangeType = Literal["insertion", "deletion"]
MarkType = Literal["highlighted", "read-only", "comment"]


def generate_change_id(prefix: str = "change") -> str:
    """Generate a collision-resistant identifier for a tracked change.

    The id combines the current time in milliseconds with random bits, so
    ids are unique within and across processes but not reproducible.

    Parameters
    ----------
    prefix : str, default = "change"
        Leading component of the identifier

    Returns
    -------
    str
        Identifier such as ``change-1735689600000-3f9a1c2b7``

    """
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


class Node(ABC):
    """Base class for all tree nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Leaf
# ============================================================================


@dataclass
class Text(Node):
    """Text run (leaf) with orthogonal formatting attributes.

    Parameters
    ----------
    text : str
        Text content
    strong : bool, default = False
        Bold (``**text**``)
    emphasis : bool, default = False
        Italic (``*text*``)
    code : bool, default = False
        Inline code (`` `text` ``)
    underline : bool, default = False
        Underline (no markdown syntax; dropped on serialization)
    strikethrough : bool, default = False
        Strikethrough (``~~text~~``)
    highlighted : bool, default = False
        Highlight mark
    read_only : bool, default = False
        Read-only mark (``"read-only"`` in editor JSON)
    comment : str or None, default = None
        Comment attached to the run
    is_instruction_to_ai : bool, default = False
        Whether the comment is an instruction to an AI assistant

    """

    text: str = ""
    strong: bool = False
    emphasis: bool = False
    code: bool = False
    underline: bool = False
    strikethrough: bool = False
    highlighted: bool = False
    read_only: bool = False
    comment: Optional[str] = None
    is_instruction_to_ai: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)

    @property
    def mark_type(self) -> Optional[MarkType]:
        """Return the mark wrapper this leaf serializes with, if any.

        Only one mark wrapper is emitted per leaf, chosen in the order
        highlighted, read-only, comment.
        """
        if self.highlighted:
            return "highlighted"
        if self.read_only:
            return "read-only"
        if self.comment is not None:
            return "comment"
        return None

    def same_attributes(self, other: Text) -> bool:
        """Return True if both leaves carry identical attributes (text ignored)."""
        return replace(self, text="") == replace(other, text="")


# ============================================================================
# Element nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node containing the top-level blocks.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level block nodes
    metadata : dict, default = empty dict
        Document-level metadata (e.g. the parse strategy that produced it)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing leaves and inline links."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    depth : int
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline content

    """

    depth: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading depth is between 1 and 6."""
        if not 1 <= self.depth <= 6:
            raise ValueError(f"Heading depth must be 1-6, got {self.depth}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for numbered lists
    children : list of Node, default = empty list
        ``ListItem`` children
    start : int or None, default = None
        First number of an ordered list when it is not 1

    """

    ordered: bool
    children: list[Node] = field(default_factory=list)
    start: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Leaves (after flattening) or block nodes
    checked : bool or None, default = None
        Task list state; None for a plain item

    """

    children: list[Node] = field(default_factory=list)
    checked: Optional[bool] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block, usually holding a single text leaf.

    Parameters
    ----------
    children : list of Node, default = empty list
        Text leaves; their text is emitted verbatim
    lang : str or None, default = None
        Language tag from the opening fence

    """

    children: list[Node] = field(default_factory=list)
    lang: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class Link(Node):
    """Inline hyperlink wrapping text leaves."""

    url: str
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class MarkdownBlock(Node):
    """Host-supplied block that owns a fragment of a markdown file.

    The block splitter operates inside the nearest enclosing block of this
    kind; ``id`` is preserved across edits.

    Parameters
    ----------
    id : str
        Caller-supplied identifier
    children : list of Node, default = empty list
        Block content
    level : int or None, default = None
        Nesting level used by the host view

    """

    id: str
    children: list[Node] = field(default_factory=list)
    level: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this markdown block."""
        return visitor.visit_markdown_block(self)


@dataclass
class TrackedChange(Node):
    """Block-level wrapper marking content as an insertion or deletion.

    Parameters
    ----------
    change_id : str
        Identifier from the source tag, or a generated one
    change_type : {'insertion', 'deletion'}
        Kind of change
    children : list of Node, default = empty list
        Wrapped block content
    user_id : str or None, default = None
        Author of the change
    timestamp : int or None, default = None
        Creation time in milliseconds since the epoch

    """

    change_id: str
    change_type: ChangeType
    children: list[Node] = field(default_factory=list)
    user_id: Optional[str] = None
    timestamp: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate the change type."""
        if self.change_type not in ("insertion", "deletion"):
            raise ValueError(f"change_type must be 'insertion' or 'deletion', got {self.change_type!r}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this tracked change."""
        return visitor.visit_tracked_change(self)

    @classmethod
    def create(cls, change_type: ChangeType, children: list[Node], user_id: Optional[str] = None) -> TrackedChange:
        """Create a new tracked change stamped with a fresh id and the current time.

        Parameters
        ----------
        change_type : {'insertion', 'deletion'}
            Kind of change
        children : list of Node
            Content to wrap
        user_id : str or None, default = None
            Author of the change

        Returns
        -------
        TrackedChange
            New tracked change node

        Examples
        --------
        >>> change = TrackedChange.create("insertion", [Paragraph(children=[Text("new")])], user_id="u1")
        >>> change.change_id.startswith("change-")
        True

        """
        return cls(
            change_id=generate_change_id(),
            change_type=change_type,
            children=list(children),
            user_id=user_id,
            timestamp=int(time.time() * 1000),
        )


ELEMENT_TYPES: tuple[type[Node], ...] = (
    Document,
    Paragraph,
    Heading,
    List,
    ListItem,
    CodeBlock,
    Link,
    MarkdownBlock,
    TrackedChange,
)

INLINE_TYPES: tuple[type[Node], ...] = (Text, Link)


def is_element(node: Any) -> bool:
    """Return True if ``node`` is an element (a node that owns children)."""
    return isinstance(node, ELEMENT_TYPES)


def is_tracked_change(node: Any) -> bool:
    """Return True if ``node`` is a tracked-change wrapper."""
    return isinstance(node, TrackedChange)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Copy of the child list (empty for leaves)

    Examples
    --------
    >>> heading = Heading(depth=1, children=[Text("Hello"), Text("world", strong=True)])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, ELEMENT_TYPES):
        return list(node.children)  # type: ignore[attr-defined]
    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Parameters
    ----------
    node : Node
        The node to copy
    new_children : list of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node with replaced children; leaves are returned as-is

    """
    if isinstance(node, ELEMENT_TYPES):
        return replace(node, children=list(new_children))  # type: ignore[type-var]
    return node
