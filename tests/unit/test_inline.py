#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline.py
"""Unit tests for inline formatting helpers."""

import pytest

from docmark.ast import Text
from docmark.parsers.inline import (
    apply_inline_formatting,
    build_mark_leaf,
    escape_comment,
    has_inline_delimiters,
    parse_formatted_text,
    unescape_comment,
)
from docmark.parsers.scanner import find_marks


@pytest.mark.unit
class TestApplyInlineFormatting:
    """Tests for stripping delimiters from a whole span."""

    @pytest.mark.parametrize(
        "source,text,attrs",
        [
            ("plain", "plain", {}),
            ("**b**", "b", {"strong": True}),
            ("*i*", "i", {"emphasis": True}),
            ("`c`", "c", {"code": True}),
            ("***bi***", "bi", {"strong": True, "emphasis": True}),
            ("`**bc**`", "bc", {"strong": True, "code": True}),
            ("`*ic*`", "ic", {"emphasis": True, "code": True}),
            ("`***x***`", "x", {"strong": True, "emphasis": True, "code": True}),
        ],
    )
    def test_combinations(self, source, text, attrs):
        """Test every combination of the three delimiters."""
        assert apply_inline_formatting(source) == (text, attrs)

    def test_all_pairs_removed(self):
        """Test that the whole span gets the attribute."""
        assert apply_inline_formatting("**a** and **b**") == ("a and b", {"strong": True})

    def test_has_inline_delimiters(self):
        """Test delimiter detection."""
        assert has_inline_delimiters("a *b* c")
        assert has_inline_delimiters("`x`")
        assert not has_inline_delimiters("a * b")
        assert not has_inline_delimiters("plain")


@pytest.mark.unit
class TestParseFormattedText:
    """Tests for splitting a span into leaves."""

    def test_runs_and_plain_text(self):
        """Test that plain text between runs is kept."""
        assert parse_formatted_text("Hello **bold** and *it* `x`") == [
            Text("Hello "),
            Text("bold", strong=True),
            Text(" and "),
            Text("it", emphasis=True),
            Text(" "),
            Text("x", code=True),
        ]

    def test_code_run_taken_whole(self):
        """Test that a code run is one leaf and its inner stars still mark emphasis."""
        assert parse_formatted_text("x `a*b*c` y") == [Text("x "), Text("abc", emphasis=True, code=True), Text(" y")]

    def test_no_runs(self):
        """Test plain text without delimiters."""
        assert parse_formatted_text("just text") == [Text("just text")]

    def test_empty(self):
        """Test that empty input still yields one leaf."""
        assert parse_formatted_text("") == [Text("")]

    def test_extra_attributes(self):
        """Test that extra attributes reach every leaf."""
        leaves = parse_formatted_text("a **b**", highlighted=True)
        assert leaves == [Text("a ", highlighted=True), Text("b", strong=True, highlighted=True)]


@pytest.mark.unit
class TestBuildMarkLeaf:
    """Tests for building leaves from mark matches."""

    def _leaf(self, source):
        return build_mark_leaf(next(find_marks(source)))

    def test_highlighted_with_formatting(self):
        """Test a highlighted bold span."""
        assert self._leaf('<mark type="highlighted">**key**</mark>') == Text("key", strong=True, highlighted=True)

    def test_read_only(self):
        """Test a read-only span."""
        assert self._leaf('<mark type="read-only">fixed</mark>') == Text("fixed", read_only=True)

    def test_comment_unescaped(self):
        """Test that comment entities are decoded."""
        leaf = self._leaf('<mark type="comment" comment="a &lt;b&gt; &amp; &quot;c&quot;">t</mark>')
        assert leaf.comment == 'a <b> & "c"'
        assert not leaf.is_instruction_to_ai

    def test_comment_without_attribute(self):
        """Test that a comment mark without a comment gets an empty one."""
        leaf = self._leaf('<mark type="comment">t</mark>')
        assert leaf.comment == ""
        assert leaf.mark_type == "comment"

    def test_ai_instruction(self):
        """Test the AI instruction flag."""
        leaf = self._leaf('<mark type="comment" comment="do it" ai-instructions="yes">t</mark>')
        assert leaf.is_instruction_to_ai
        leaf = self._leaf('<mark type="comment" comment="do it" ai-instructions="no">t</mark>')
        assert not leaf.is_instruction_to_ai


@pytest.mark.unit
class TestCommentEscaping:
    """Tests for comment attribute escaping."""

    def test_escape(self):
        """Test that all five characters are escaped."""
        assert escape_comment("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;&apos;&amp;&apos;&lt;/a&gt;"

    def test_unescape_is_single_pass(self):
        """Test that escaped entities are not decoded twice."""
        assert unescape_comment("&amp;lt;") == "&lt;"

    @pytest.mark.parametrize("comment", ['say "hi"', "a & b", "<tag>", "it's", "&amp; literal"])
    def test_reversible(self, comment):
        """Test that unescape reverses escape."""
        assert unescape_comment(escape_comment(comment)) == comment
