#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for parser and renderer options."""

import dataclasses

import pytest

from docmark.options import MarkdownParserOptions, MarkdownRendererOptions


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = MarkdownParserOptions()
        assert options.parse_strikethrough is True
        assert options.parse_task_lists is True
        assert options.inline_formatting_fallback is True
        assert options.normalize is True
        assert options.change_id_prefix == "change"

    def test_frozen(self):
        """Test that options cannot be modified in place."""
        options = MarkdownParserOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.normalize = False

    def test_create_updated(self):
        """Test cloning with changes."""
        options = MarkdownParserOptions()
        updated = options.create_updated(normalize=False)
        assert updated.normalize is False
        assert options.normalize is True
        assert updated.parse_task_lists is True

    def test_empty_prefix_rejected(self):
        """Test change id prefix validation."""
        with pytest.raises(ValueError, match="change_id_prefix"):
            MarkdownParserOptions(change_id_prefix="")

    def test_field_help_metadata(self):
        """Test that every field documents itself."""
        for field in dataclasses.fields(MarkdownParserOptions):
            assert field.metadata.get("help")


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Tests for MarkdownRendererOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = MarkdownRendererOptions()
        assert options.bullet_symbol == "-"
        assert options.render_task_checkboxes is True
        assert options.render_strikethrough is True
        assert options.render_links is True
        assert options.include_change_ids is False
        assert options.tracked_change_style == "tag"

    def test_invalid_bullet(self):
        """Test bullet validation."""
        with pytest.raises(ValueError, match="bullet_symbol"):
            MarkdownRendererOptions(bullet_symbol="#")

    def test_invalid_change_style(self):
        """Test tracked change style validation."""
        with pytest.raises(ValueError, match="tracked_change_style"):
            MarkdownRendererOptions(tracked_change_style="diff")

    def test_create_updated_validates(self):
        """Test that cloning re-runs validation."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions().create_updated(bullet_symbol="x")
