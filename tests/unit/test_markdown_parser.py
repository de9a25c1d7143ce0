#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the standard markdown converter."""

import pytest

from docmark.ast import CodeBlock, Heading, Link, List, ListItem, Paragraph, Text
from docmark.exceptions import DependencyError, InvalidOptionsError, ParsingError
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.parsers.markdown import InlineFormattingFallback, MarkdownToTreeConverter


@pytest.fixture
def converter():
    return MarkdownToTreeConverter()


@pytest.mark.unit
class TestBlockTokens:
    """Tests for block level conversion."""

    def test_heading_and_paragraph(self, converter):
        """Test a heading followed by a formatted paragraph."""
        doc = converter.parse("# Title\n\nSome **bold** text.")
        assert doc.children == [
            Heading(depth=1, children=[Text("Title")]),
            Paragraph(children=[Text("Some "), Text("bold", strong=True), Text(" text.")]),
        ]

    def test_empty_input(self, converter):
        """Test that empty input gives one empty paragraph."""
        assert converter.parse("").children == [Paragraph(children=[Text("")])]

    def test_fenced_code(self, converter):
        """Test that a fence keeps its content and first info word."""
        doc = converter.parse("```python title\nx = 1\n```")
        assert doc.children == [CodeBlock(lang="python", children=[Text("x = 1")])]

    def test_fenced_code_without_info(self, converter):
        """Test a fence without a language."""
        assert converter.parse("```\n*x*\n```").children == [CodeBlock(children=[Text("*x*")])]

    def test_unordered_list(self, converter):
        """Test an unordered list before normalization."""
        doc = converter.parse("- a\n- b")
        assert doc.children == [
            List(
                ordered=False,
                children=[
                    ListItem(children=[Paragraph(children=[Text("a")])]),
                    ListItem(children=[Paragraph(children=[Text("b")])]),
                ],
            )
        ]

    def test_ordered_list_start(self, converter):
        """Test that a start other than 1 is kept."""
        assert converter.parse("3. c\n4. d").children[0].start == 3
        assert converter.parse("1. a\n2. b").children[0].start is None

    def test_task_list(self, converter):
        """Test checked and unchecked task items."""
        items = converter.parse("- [x] done\n- [ ] todo").children[0].children
        assert items[0].checked is True
        assert items[1].checked is False
        assert items[0].children == [Paragraph(children=[Text("done")])]

    def test_task_list_disabled(self):
        """Test that checkbox parsing can be turned off."""
        converter = MarkdownToTreeConverter(MarkdownParserOptions(parse_task_lists=False))
        item = converter.parse("- [x] done").children[0].children[0]
        assert item.checked is None

    def test_block_quote_is_unwrapped(self, converter):
        """Test that quoted blocks are kept in place."""
        assert converter.parse("> quoted").children == [Paragraph(children=[Text("quoted")])]

    def test_thematic_break(self, converter):
        """Test that a rule becomes a literal paragraph."""
        doc = converter.parse("a\n\n---\n\nb")
        assert doc.children[1] == Paragraph(children=[Text("---")])


@pytest.mark.unit
class TestInlineTokens:
    """Tests for inline conversion."""

    def test_nested_formatting_flattened(self, converter):
        """Test that nested emphasis becomes attribute sets."""
        doc = converter.parse("***both*** and *it*")
        assert doc.children[0].children == [
            Text("both", strong=True, emphasis=True),
            Text(" and "),
            Text("it", emphasis=True),
        ]

    def test_code_span(self, converter):
        """Test inline code."""
        assert converter.parse("use `x`").children[0].children == [Text("use "), Text("x", code=True)]

    def test_strikethrough(self, converter):
        """Test the strikethrough plugin."""
        assert converter.parse("~~gone~~").children[0].children == [Text("gone", strikethrough=True)]

    def test_link(self, converter):
        """Test that links become link elements."""
        doc = converter.parse("see [the **site**](http://example.com)")
        assert doc.children[0].children == [
            Text("see "),
            Link(url="http://example.com", children=[Text("the "), Text("site", strong=True)]),
        ]

    def test_image_kept_as_source(self, converter):
        """Test that images stay as markdown text."""
        doc = converter.parse("![alt](pic.png)")
        assert doc.children[0].children == [Text("![alt](pic.png)")]

    def test_softbreak_merged(self, converter):
        """Test that soft breaks join the surrounding text."""
        assert converter.parse("a\nb").children[0].children == [Text("a\nb")]


@pytest.mark.unit
class TestInlineFormattingFallback:
    """Tests for the leftover delimiter post-pass."""

    def test_code_span_with_stars(self, converter):
        """Test that delimiters inside a code span become attributes."""
        doc = converter.parse("`**x**`")
        assert doc.children[0].children == [Text("x", strong=True, code=True)]

    def test_fallback_disabled(self):
        """Test that the post-pass can be turned off."""
        converter = MarkdownToTreeConverter(MarkdownParserOptions(inline_formatting_fallback=False))
        assert converter.parse("`**x**`").children[0].children == [Text("**x**", code=True)]

    def test_code_blocks_skipped(self):
        """Test that code block content is left verbatim."""
        nodes = [CodeBlock(children=[Text("**x**")]), Paragraph(children=[Text("*y*")])]
        result = InlineFormattingFallback().transform_nodes(nodes)
        assert result == [CodeBlock(children=[Text("**x**")]), Paragraph(children=[Text("y", emphasis=True)])]


@pytest.mark.unit
class TestErrors:
    """Tests for failure modes."""

    def test_wrong_options_type(self):
        """Test that renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownToTreeConverter(MarkdownRendererOptions())

    def test_tokenizer_failure_wrapped(self, converter, monkeypatch):
        """Test that mistune errors become ParsingError."""
        import mistune

        class BrokenMarkdown:
            def parse(self, text):
                raise RuntimeError("boom")

        monkeypatch.setattr(mistune, "create_markdown", lambda **kwargs: BrokenMarkdown())
        with pytest.raises(ParsingError) as exc_info:
            converter.parse("text")
        assert exc_info.value.parsing_stage == "tokenize"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_old_mistune_rejected(self, converter, monkeypatch):
        """Test that an unsupported mistune version raises DependencyError."""
        monkeypatch.setattr(
            "docmark.utils.decorators.check_version_requirement",
            lambda name, spec: (False, "2.0.5"),
        )
        with pytest.raises(DependencyError) as exc_info:
            converter.parse("text")
        assert exc_info.value.version_mismatches == [("mistune", ">=3.0.0", "2.0.5")]
