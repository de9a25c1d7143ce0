#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/inline.py
"""Inline formatting helpers shared by the parsers.

Two levels of inline parsing are used:

- ``apply_inline_formatting`` strips ``**``, ``*`` and backtick delimiters
  from a whole span and reports which attributes they stood for. It is used
  on mark contents and by the standard parser's post-pass.
- ``parse_formatted_text`` splits a plain span into leaves around each
  delimited run, keeping the unformatted text between runs.

"""

from __future__ import annotations

import re
from typing import Any

from docmark.ast.nodes import Text

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_CODE_RE = re.compile(r"`(.+?)`")

# Code alternatives come first so a backtick run is matched as one run.
_FORMATTED_RUN_RE = re.compile(r"`[^`\n]+?`|\*\*\*.+?\*\*\*|\*\*.+?\*\*|\*.+?\*")

_COMMENT_ENTITIES = {
    "&quot;": '"',
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&apos;": "'",
}
_COMMENT_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _COMMENT_ENTITIES))


def escape_comment(comment: str) -> str:
    """Escape a comment for use inside a double-quoted attribute.

    Parameters
    ----------
    comment : str
        Raw comment text

    Returns
    -------
    str
        Text with ``& < > " '`` replaced by entities

    """
    return (
        comment.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def unescape_comment(comment: str) -> str:
    """Reverse ``escape_comment`` in a single pass.

    Only the five entities produced by ``escape_comment`` are decoded, so
    ``&amp;lt;`` becomes ``&lt;`` rather than ``<``.
    """
    return _COMMENT_ENTITY_RE.sub(lambda match: _COMMENT_ENTITIES[match.group(0)], comment)


def apply_inline_formatting(text: str) -> tuple[str, dict[str, bool]]:
    """Strip bold, italic and code delimiters from a span.

    Bold is applied first; italic only when no ``**`` remains afterwards;
    code last. Every delimiter pair of a kind is removed, and the span as a
    whole receives the attribute.

    Parameters
    ----------
    text : str
        Span text

    Returns
    -------
    tuple of (str, dict)
        The stripped text and the attributes that were found, e.g.
        ``{"strong": True}``

    Examples
    --------
    >>> apply_inline_formatting("`***x***`")
    ('x', {'strong': True, 'emphasis': True, 'code': True})

    """
    attrs: dict[str, bool] = {}
    if _BOLD_RE.search(text):
        attrs["strong"] = True
        text = _BOLD_RE.sub(r"\1", text)
    if "**" not in text and _ITALIC_RE.search(text):
        attrs["emphasis"] = True
        text = _ITALIC_RE.sub(r"\1", text)
    if _CODE_RE.search(text):
        attrs["code"] = True
        text = _CODE_RE.sub(r"\1", text)
    return text, attrs


def has_inline_delimiters(text: str) -> bool:
    """Return True if ``text`` still contains a bold, italic or code run."""
    return bool(_BOLD_RE.search(text) or _ITALIC_RE.search(text) or _CODE_RE.search(text))


def parse_formatted_text(text: str, **attributes: Any) -> list[Text]:
    """Split a plain span into leaves around its delimited runs.

    Parameters
    ----------
    text : str
        Span text (no mark tags)
    **attributes : Any
        Attributes applied to every produced leaf

    Returns
    -------
    list of Text
        At least one leaf; text without any run comes back as a single
        literal leaf

    """
    leaves: list[Text] = []
    last = 0
    for match in _FORMATTED_RUN_RE.finditer(text):
        if match.start() > last:
            leaves.append(Text(text=text[last : match.start()], **attributes))
        inner, found = apply_inline_formatting(match.group(0))
        leaves.append(Text(text=inner, **{**attributes, **found}))
        last = match.end()
    if last < len(text):
        leaves.append(Text(text=text[last:], **attributes))

    if not leaves:
        return [Text(text=text, **attributes)]
    return leaves


def build_mark_leaf(match: re.Match[str]) -> Text:
    """Build the single leaf for a matched mark tag.

    The inner text goes through ``apply_inline_formatting``, then the mark
    attribute named by the tag's type is set.

    Parameters
    ----------
    match : re.Match
        Match of the mark pattern

    Returns
    -------
    Text
        Leaf carrying the formatting and the mark

    """
    inner, attrs = apply_inline_formatting(match.group("content"))
    leaf = Text(text=inner, **attrs)
    mark_type = match.group("type")
    if mark_type == "highlighted":
        leaf.highlighted = True
    elif mark_type == "read-only":
        leaf.read_only = True
    else:
        leaf.comment = unescape_comment(match.group("comment") or "")
        leaf.is_instruction_to_ai = match.group("ai") == "yes"
    return leaf
