#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/__init__.py
"""Markdown parsers producing the document tree.

- ``MarkdownToTreeConverter``: standard markdown via mistune
- ``LineMarkdownParser``: line-oriented parser for text with ``<mark>`` tags
- ``TrackedChangeParser``: splits around ``[change]`` tags
"""

from docmark.parsers.base import BaseParser
from docmark.parsers.lines import LineMarkdownParser
from docmark.parsers.markdown import InlineFormattingFallback, MarkdownToTreeConverter
from docmark.parsers.scanner import MarkedSpan, ParseStrategy, detect_strategy, extract_marked_text
from docmark.parsers.tracked_changes import TrackedChangeParser

__all__ = [
    "BaseParser",
    "LineMarkdownParser",
    "MarkdownToTreeConverter",
    "InlineFormattingFallback",
    "TrackedChangeParser",
    "ParseStrategy",
    "MarkedSpan",
    "detect_strategy",
    "extract_marked_text",
]
