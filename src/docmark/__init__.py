#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/__init__.py
"""docmark - bidirectional markdown <-> rich document tree conversion.

docmark parses markdown extended with editor annotations into the document
tree used by an editable rich-text view, serializes the tree back, and
splits a block at a cursor.

Extensions
----------
- ``<mark type="highlighted|read-only|comment" [comment="..."] [ai-instructions="yes"]>text</mark>``
  annotates a run of text.
- ``[change type="create|update|delete" [id="..."]]content[/change]`` wraps
  block content as a tracked insertion or deletion.

Examples
--------
    >>> from docmark import parse, serialize
    >>> tree = parse('<mark type="comment" comment="fix this">bad text</mark>')
    >>> tree.children[0].children[0].comment
    'fix this'
    >>> serialize(tree)
    '<mark type="comment" comment="fix this">bad text</mark>'

"""

__version__ = "0.1.0"

from docmark.ast import (
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
    normalize_tree,
)
from docmark.api import parse, parse_with_fallback, serialize, split_at
from docmark.ast.splitting import BlockSplit, CursorPosition, Selection
from docmark.exceptions import DocmarkError, ParsingError, SplitError, ValidationError
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.parsers.scanner import extract_marked_text

__all__ = [
    "__version__",
    # Boundary functions
    "parse",
    "parse_with_fallback",
    "serialize",
    "split_at",
    "extract_marked_text",
    "normalize_tree",
    # Nodes
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "List",
    "ListItem",
    "CodeBlock",
    "Link",
    "MarkdownBlock",
    "TrackedChange",
    "Text",
    # Cursor
    "CursorPosition",
    "Selection",
    "BlockSplit",
    # Options
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    # Errors
    "DocmarkError",
    "ValidationError",
    "ParsingError",
    "SplitError",
]
