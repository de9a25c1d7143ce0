#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/base.py
"""Base parser interface for docmark.

This module defines the abstract base class that every markdown parser in
docmark inherits from. Each parser turns a markdown string into a
``Document`` whose children are the parsed block nodes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docmark.ast.nodes import Document
from docmark.exceptions import InvalidOptionsError
from docmark.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for all markdown parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Creating a custom parser:

        >>> class MyCustomParser(BaseParser):
        ...     def parse(self, markdown):
        ...         return Document(children=[Paragraph(children=[Text(markdown)])])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, markdown: str) -> Document:
        """Parse markdown text into a document tree.

        Parameters
        ----------
        markdown : str
            Markdown source

        Returns
        -------
        Document
            Root node whose children are the parsed blocks

        """
        pass
