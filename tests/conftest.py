"""Pytest configuration and shared fixtures for the docmark test suite.

This module provides shared fixtures and test configuration used across the
unit and integration suites.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from docmark.ast import Document, List, ListItem, MarkdownBlock, Paragraph, Text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def block_tree() -> Document:
    """Provide a document with two markdown blocks.

    Block ``b1`` holds a paragraph with three leaves; block ``b2`` holds a
    one-item list.

    """
    return Document(
        children=[
            MarkdownBlock(
                id="b1",
                children=[
                    Paragraph(children=[Text("Hello "), Text("bold", strong=True), Text(" world")]),
                ],
            ),
            MarkdownBlock(
                id="b2",
                children=[
                    List(ordered=False, children=[ListItem(children=[Text("item text")])]),
                ],
            ),
        ]
    )
