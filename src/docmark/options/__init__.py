#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/options/__init__.py
"""Configuration options for docmark parsers and renderers."""

from docmark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from docmark.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
]
