#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_utils.py
"""Unit tests for dependency checking utilities and the exception hierarchy."""

import pytest

from docmark.exceptions import (
    DependencyError,
    DocmarkError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    SplitError,
    ValidationError,
)
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.utils.decorators import requires_dependencies
from docmark.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestPackages:
    """Tests for version lookups."""

    def test_installed_package(self):
        """Test that an installed distribution reports a version."""
        assert get_package_version("mistune")

    def test_missing_package(self):
        """Test that a missing distribution gives None."""
        assert get_package_version("docmark-no-such-distribution") is None

    def test_requirement_met(self):
        """Test a satisfied requirement."""
        meets, installed = check_version_requirement("mistune", ">=3.0.0")
        assert meets
        assert installed == get_package_version("mistune")

    def test_requirement_not_met(self):
        """Test an unsatisfiable requirement."""
        meets, _installed = check_version_requirement("mistune", "<0.1")
        assert not meets

    def test_missing_package_requirement(self):
        """Test a requirement on a missing distribution."""
        assert check_version_requirement("docmark-no-such-distribution", ">=1") == (False, None)

    def test_invalid_specifier(self):
        """Test that a malformed specifier raises ValueError."""
        with pytest.raises(ValueError, match="Invalid version specifier"):
            check_version_requirement("mistune", "not a spec")


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the dependency gate decorator."""

    def test_passes_through(self):
        """Test that the wrapped function runs when dependencies are present."""

        @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        def run(value):
            return value * 2

        assert run(4) == 8

    def test_missing_module(self):
        """Test that a missing module raises DependencyError with an install hint."""

        @requires_dependencies("example", [("docmark-missing", "docmark_missing_module", ">=1.0")])
        def run():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            run()
        error = exc_info.value
        assert error.missing_packages == [("docmark-missing", ">=1.0")]
        assert isinstance(error.original_import_error, ImportError)
        assert 'pip install "docmark-missing>=1.0"' in str(error)


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("v"),
            ParsingError("p"),
            RenderingError("r"),
            SplitError("s", path=[0, 1]),
            DependencyError("markdown", [("mistune", ">=3.0.0")]),
        ],
    )
    def test_rooted_hierarchy(self, error):
        """Test that every error derives from DocmarkError."""
        assert isinstance(error, DocmarkError)

    def test_original_error_kept(self):
        """Test that the wrapped error is stored."""
        cause = RuntimeError("cause")
        error = ParsingError("failed", parsing_stage="tokenize", original_error=cause)
        assert error.original_error is cause
        assert error.message == "failed"

    def test_split_error_path(self):
        """Test that the split path is stored as a tuple."""
        assert SplitError("bad", path=[0, 2]).path == (0, 2)
        assert SplitError("bad").path is None

    def test_invalid_options_error(self):
        """Test the options type error details."""
        error = InvalidOptionsError("markdown", MarkdownParserOptions, MarkdownRendererOptions)
        assert isinstance(error, ValidationError)
        assert error.expected_type is MarkdownParserOptions
        assert error.received_type is MarkdownRendererOptions
        assert "MarkdownParserOptions" in str(error)
