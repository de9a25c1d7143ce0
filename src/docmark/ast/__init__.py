#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/__init__.py
"""Document tree for the editable markdown view.

This package provides the node classes, the visitor and transformer bases,
the normalizer passes, editor JSON interchange and the block splitter.

"""

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
    generate_change_id,
    get_node_children,
    is_element,
    is_tracked_change,
    replace_node_children,
)
from docmark.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from docmark.ast.transforms import (
    FillEmptyChildren,
    FlattenListItemParagraphs,
    NodeTransformer,
    extract_text,
    normalize_tree,
)
from docmark.ast.visitors import NodeVisitor

__all__ = [
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
    # Helpers
    "generate_change_id",
    "get_node_children",
    "replace_node_children",
    "is_element",
    "is_tracked_change",
    # Traversal
    "NodeVisitor",
    "NodeTransformer",
    "FillEmptyChildren",
    "FlattenListItemParagraphs",
    "normalize_tree",
    "extract_text",
    # Interchange
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
