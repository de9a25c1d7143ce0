#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/renderers/__init__.py
"""Renderers that turn a document tree back into text."""

from docmark.renderers.base import BaseRenderer
from docmark.renderers.markdown import MarkdownRenderer

__all__ = ["BaseRenderer", "MarkdownRenderer"]
