#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/ast/serialization.py
"""Editor JSON interchange for the document tree.

The host editor stores trees as plain JSON: elements are objects with a
``type`` tag and a ``children`` list, leaves are objects with a ``text`` key
and one key per set attribute. This module converts between that shape and
the node dataclasses.

Type tags
---------
``paragraph``, ``heading`` (``depth``), ``list`` (``ordered``, ``start``),
``listItem`` (``checked``), ``code`` (``lang``), ``link`` (``url``),
``markdown_block`` (``id``, ``level``), ``tracked-change`` (``changeId``,
``changeType``, ``userId``, ``timestamp``).

Leaf keys
---------
``strong``, ``emphasis``, ``code``, ``underline``, ``strikethrough``,
``highlighted``, ``read-only``, ``comment``, ``isInstructionToAI``.

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
from docmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Leaf dataclass field -> editor JSON key
_LEAF_FLAG_KEYS: dict[str, str] = {
    "strong": "strong",
    "emphasis": "emphasis",
    "code": "code",
    "underline": "underline",
    "strikethrough": "strikethrough",
    "highlighted": "highlighted",
    "read_only": "read-only",
    "is_instruction_to_ai": "isInstructionToAI",
}


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"text": node.text}
    for attribute, key in _LEAF_FLAG_KEYS.items():
        if getattr(node, attribute):
            result[key] = True
    if node.comment is not None:
        result["comment"] = node.comment
    return result


def _serialize_element(node_type: str, node: Node, **fields: Any) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node_type}
    result.update({key: value for key, value in fields.items() if value is not None})
    result["children"] = [ast_to_dict(child) for child in node.children]  # type: ignore[attr-defined]
    return result


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Text: _serialize_text,
    Paragraph: lambda node: _serialize_element("paragraph", node),
    Heading: lambda node: _serialize_element("heading", node, depth=node.depth),
    List: lambda node: _serialize_element("list", node, ordered=node.ordered, start=node.start),
    ListItem: lambda node: _serialize_element("listItem", node, checked=node.checked),
    CodeBlock: lambda node: _serialize_element("code", node, lang=node.lang),
    Link: lambda node: _serialize_element("link", node, url=node.url),
    MarkdownBlock: lambda node: _serialize_element("markdown_block", node, id=node.id, level=node.level),
    TrackedChange: lambda node: _serialize_element(
        "tracked-change",
        node,
        changeId=node.change_id,
        changeType=node.change_type,
        userId=node.user_id,
        timestamp=node.timestamp,
    ),
}


def ast_to_dict(node: Node) -> Any:
    """Convert a tree node to its editor JSON value.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict or list
        An element or leaf object; a ``Document`` becomes the list of its
        children's objects

    Raises
    ------
    ValidationError
        If ``node`` is not a known node type

    Examples
    --------
    >>> ast_to_dict(Paragraph(children=[Text("hi", strong=True)]))
    {'type': 'paragraph', 'children': [{'text': 'hi', 'strong': True}]}

    """
    if isinstance(node, Document):
        return [ast_to_dict(child) for child in node.children]

    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise ValidationError(
            f"Cannot serialize object of type {type(node).__name__}",
            parameter_name="node",
            parameter_value=node,
        )
    return serializer(node)


def _require(data: dict[str, Any], key: str, expected: type | tuple[type, ...]) -> Any:
    value = data.get(key)
    if not isinstance(value, expected) or isinstance(value, bool) and expected is int:
        raise ValidationError(
            f"Field {key!r} of {data.get('type', 'node')!r} must be {getattr(expected, '__name__', expected)}",
            parameter_name=key,
            parameter_value=value,
        )
    return value


def _optional(data: dict[str, Any], key: str, expected: type) -> Any:
    if data.get(key) is None:
        return None
    return _require(data, key, expected)


def _deserialize_children(data: dict[str, Any]) -> list[Node]:
    children = data.get("children", [])
    if not isinstance(children, list):
        raise ValidationError(
            "Field 'children' must be a list",
            parameter_name="children",
            parameter_value=children,
        )
    return [dict_to_ast(child) for child in children]


def _deserialize_text(data: dict[str, Any]) -> Text:
    text = _require(data, "text", str)
    comment = _optional(data, "comment", str)
    flags = {attribute: bool(data.get(key, False)) for attribute, key in _LEAF_FLAG_KEYS.items()}
    return Text(text=text, comment=comment, **flags)


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    depth = _require(data, "depth", int)
    try:
        return Heading(depth=depth, children=_deserialize_children(data))
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="depth", parameter_value=depth, original_error=e) from e


def _deserialize_list(data: dict[str, Any]) -> List:
    return List(
        ordered=bool(data.get("ordered", False)),
        children=_deserialize_children(data),
        start=_optional(data, "start", int),
    )


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    return ListItem(children=_deserialize_children(data), checked=_optional(data, "checked", bool))


def _deserialize_tracked_change(data: dict[str, Any]) -> TrackedChange:
    change_type = _require(data, "changeType", str)
    if change_type not in ("insertion", "deletion"):
        raise ValidationError(
            f"changeType must be 'insertion' or 'deletion', got {change_type!r}",
            parameter_name="changeType",
            parameter_value=change_type,
        )
    return TrackedChange(
        change_id=_require(data, "changeId", str),
        change_type=change_type,  # type: ignore[arg-type]
        children=_deserialize_children(data),
        user_id=_optional(data, "userId", str),
        timestamp=_optional(data, "timestamp", int),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    "paragraph": lambda data: Paragraph(children=_deserialize_children(data)),
    "heading": _deserialize_heading,
    "list": _deserialize_list,
    "listItem": _deserialize_list_item,
    "code": lambda data: CodeBlock(children=_deserialize_children(data), lang=_optional(data, "lang", str)),
    "link": lambda data: Link(url=_require(data, "url", str), children=_deserialize_children(data)),
    "markdown_block": lambda data: MarkdownBlock(
        id=_require(data, "id", str),
        children=_deserialize_children(data),
        level=_optional(data, "level", int),
    ),
    "tracked-change": _deserialize_tracked_change,
}


def dict_to_ast(data: Any) -> Node:
    """Convert an editor JSON value to a tree node.

    Parameters
    ----------
    data : dict or list
        An element or leaf object, or a list of top-level objects (which
        becomes a ``Document``)

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValidationError
        If the payload is not a valid tree

    """
    if isinstance(data, list):
        return Document(children=[dict_to_ast(child) for child in data])
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected an object, got {type(data).__name__}",
            parameter_name="data",
            parameter_value=data,
        )

    if "type" not in data:
        if "text" in data:
            return _deserialize_text(data)
        raise ValidationError("Object has neither 'type' nor 'text'", parameter_name="data", parameter_value=data)

    node_type = data["type"]
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        logger.warning(f"Unknown element type {node_type!r}; reading it as a paragraph")
        return Paragraph(children=_deserialize_children(data))
    return deserializer(data)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a tree node to an editor JSON string.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text; unicode characters are kept unescaped

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize an editor JSON string to a tree node.

    Parameters
    ----------
    json_str : str
        JSON text

    Returns
    -------
    Node
        Reconstructed node (a ``Document`` for a top-level array)

    Raises
    ------
    ValidationError
        If the text is not valid JSON or not a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", parameter_name="json_str", original_error=e) from e
    return dict_to_ast(data)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
