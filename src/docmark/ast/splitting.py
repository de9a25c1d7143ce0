#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/splitting.py
"""Split a markdown block at a cursor position.

A cursor is a path of child indices from the root plus a character offset
into the addressed text leaf. Splitting finds the nearest ``MarkdownBlock``
on that path and builds two copies of it: everything before the cursor and
everything after. Only the nodes along the path are copied; untouched
siblings are shared with the input, which is never mutated.

Outcomes
--------
- ``BlockSplit`` when the cursor sits inside a markdown block.
- ``None`` when there is no enclosing block, an index is out of range, the
  path runs past a leaf, or a selection is not collapsed.
- ``SplitError`` when the path ends on an element instead of a text leaf.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Union

from docmark.ast.nodes import Document, MarkdownBlock, Node, Text, get_node_children, replace_node_children
from docmark.ast.transforms import extract_text
from docmark.exceptions import SplitError, ValidationError
from docmark.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorPosition:
    """A collapsed point in the tree.

    Parameters
    ----------
    path : sequence of int
        Child indices from the root to a text leaf
    offset : int
        Character offset into the leaf's text

    """

    path: tuple[int, ...]
    offset: int = 0

    def __post_init__(self) -> None:
        """Coerce the path to a tuple and validate its entries."""
        path = tuple(self.path)
        if any(isinstance(index, bool) or not isinstance(index, int) for index in path):
            raise ValidationError(
                f"Cursor path must contain only integers, got {list(self.path)!r}",
                parameter_name="path",
                parameter_value=self.path,
            )
        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise ValidationError(
                f"Cursor offset must be an integer, got {self.offset!r}",
                parameter_name="offset",
                parameter_value=self.offset,
            )
        object.__setattr__(self, "path", path)


@dataclass(frozen=True)
class Selection:
    """An editor selection; only a collapsed selection can be split."""

    anchor: CursorPosition
    focus: CursorPosition

    @property
    def is_collapsed(self) -> bool:
        """True when anchor and focus are the same point."""
        return self.anchor == self.focus


@dataclass
class BlockSplit:
    """Result of splitting a markdown block.

    Parameters
    ----------
    block_id : str
        Identifier of the enclosing markdown block
    before_markdown : str
        Markdown for the content before the cursor
    after_markdown : str
        Markdown for the content after the cursor
    before : MarkdownBlock
        Tree copy holding the content before the cursor
    after : MarkdownBlock
        Tree copy holding the content after the cursor
    block_path : tuple of int
        Path of the enclosing block from the root

    """

    block_id: str
    before_markdown: str
    after_markdown: str
    before: MarkdownBlock
    after: MarkdownBlock
    block_path: tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, str]:
        """Return the result in the host's ``{blockId, beforeMarkdown, afterMarkdown}`` form."""
        return {
            "blockId": self.block_id,
            "beforeMarkdown": self.before_markdown,
            "afterMarkdown": self.after_markdown,
        }


class _PathOutOfRange(Exception):
    """Internal signal: the cursor path does not exist in the tree."""


class BlockSplitter:
    """Compute the before/after markdown for a cursor inside a markdown block.

    Parameters
    ----------
    renderer : MarkdownRenderer or None, default = None
        Serializer used for both halves

    Examples
    --------
    >>> tree = Document(children=[MarkdownBlock(id="b1", children=[Paragraph(children=[Text("hello world")])])])
    >>> result = BlockSplitter().split(tree, CursorPosition(path=(0, 0, 0), offset=5))
    >>> result.before_markdown, result.after_markdown
    ('hello', ' world')

    """

    def __init__(self, renderer: MarkdownRenderer | None = None):
        """Initialize the splitter with an optional renderer."""
        self.renderer = renderer or MarkdownRenderer()

    def split(
        self,
        tree: Union[Document, Sequence[Node]],
        position: Union[CursorPosition, Selection],
    ) -> Optional[BlockSplit]:
        """Split the enclosing markdown block at ``position``.

        Parameters
        ----------
        tree : Document or sequence of Node
            Tree to split; not modified
        position : CursorPosition or Selection
            Cursor, or a selection that must be collapsed

        Returns
        -------
        BlockSplit or None
            The split, or None when no split is possible

        Raises
        ------
        SplitError
            If the path ends on a node that is not a text leaf

        """
        if isinstance(position, Selection):
            if not position.is_collapsed:
                logger.debug("Selection is not collapsed; nothing to split")
                return None
            position = position.anchor

        roots = list(tree.children) if isinstance(tree, Document) else list(tree)
        located = self._find_enclosing_block(roots, position.path)
        if located is None:
            logger.debug(f"No markdown block encloses path {list(position.path)}")
            return None

        block, block_path = located
        relative_path = position.path[len(block_path) :]
        if not relative_path:
            return None

        try:
            before, after = self._split_node(block, relative_path, position.offset, position.path)
        except _PathOutOfRange:
            logger.debug(f"Cursor path {list(position.path)} does not address a leaf")
            return None

        return BlockSplit(
            block_id=block.id,
            before_markdown=self._render_side(before),
            after_markdown=self._render_side(after),
            before=before,  # type: ignore[arg-type]
            after=after,  # type: ignore[arg-type]
            block_path=block_path,
        )

    @staticmethod
    def _find_enclosing_block(roots: list[Node], path: tuple[int, ...]) -> Optional[tuple[MarkdownBlock, tuple[int, ...]]]:
        """Return the deepest markdown block on ``path`` and its path."""
        found = None
        children = roots
        for depth, index in enumerate(path):
            if not 0 <= index < len(children):
                return None
            node = children[index]
            if isinstance(node, MarkdownBlock):
                found = (node, path[: depth + 1])
            children = get_node_children(node)
        return found

    def _split_node(self, node: Node, path: tuple[int, ...], offset: int, full_path: tuple[int, ...]) -> tuple[Node, Node]:
        children = get_node_children(node)
        index, rest = path[0], path[1:]
        if not 0 <= index < len(children):
            raise _PathOutOfRange()

        target = children[index]
        if rest:
            if isinstance(target, Text):
                raise _PathOutOfRange()
            child_before, child_after = self._split_node(target, rest, offset, full_path)
        else:
            if not isinstance(target, Text):
                raise SplitError(
                    f"Cursor path {list(full_path)} ends on a {type(target).__name__}, not a text leaf",
                    path=full_path,
                )
            child_before, child_after = self._split_leaf(target, offset)

        before = replace_node_children(node, children[:index] + [child_before])
        after = replace_node_children(node, [child_after] + children[index + 1 :])
        return before, after

    @staticmethod
    def _split_leaf(leaf: Text, offset: int) -> tuple[Text, Text]:
        offset = max(0, min(offset, len(leaf.text)))
        return replace(leaf, text=leaf.text[:offset]), replace(leaf, text=leaf.text[offset:])

    def _render_side(self, block: Node) -> str:
        # A side without any text would otherwise render as stray syntax (e.g. "# ").
        if not extract_text(block):
            return ""
        return self.renderer.render_to_string(block)


def split_at(
    tree: Union[Document, Sequence[Node]],
    position: Union[CursorPosition, Selection],
    renderer: MarkdownRenderer | None = None,
) -> Optional[BlockSplit]:
    """Split the markdown block enclosing ``position``.

    Parameters
    ----------
    tree : Document or sequence of Node
        Tree to split; not modified
    position : CursorPosition or Selection
        Cursor to split at
    renderer : MarkdownRenderer or None, default = None
        Serializer for the two halves

    Returns
    -------
    BlockSplit or None
        The split, or None when there is no enclosing block

    """
    return BlockSplitter(renderer).split(tree, position)


__all__ = ["CursorPosition", "Selection", "BlockSplit", "BlockSplitter", "split_at"]
