#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that renderers inherit from. A
renderer turns a document tree (or a bare node sequence) into text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docmark.ast.nodes import Document, Node
from docmark.exceptions import InvalidOptionsError
from docmark.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_to_string(self, tree: Document | Node | list[Node]) -> str:
        """Render a tree to a string.

        Parameters
        ----------
        tree : Document, Node or list of Node
            Tree to render

        Returns
        -------
        str
            Rendered text

        """
        pass
