#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for the markdown serializer."""

import pytest

from docmark.ast import (
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    ListItem,
    MarkdownBlock,
    Paragraph,
    Text,
    TrackedChange,
)
from docmark.exceptions import InvalidOptionsError, RenderingError
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.renderers.markdown import MarkdownRenderer


def render(node, **options):
    return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(node)


@pytest.mark.unit
class TestBlocks:
    """Tests for block rendering."""

    def test_document(self):
        """Test headings and paragraphs separated by blank lines."""
        doc = Document(
            children=[
                Heading(depth=1, children=[Text("Title")]),
                Paragraph(children=[Text("Some "), Text("bold", strong=True), Text(" text.")]),
            ]
        )
        assert render(doc) == "# Title\n\nSome **bold** text."

    def test_whitespace_paragraph_is_empty(self):
        """Test that a blank paragraph renders as nothing."""
        assert render(Paragraph(children=[Text("  ")])) == ""

    def test_code_block(self):
        """Test that code content is verbatim."""
        node = CodeBlock(lang="py", children=[Text("a = '**x**'")])
        assert render(node) == "```py\na = '**x**'\n```"
        assert render(CodeBlock(children=[Text("x")])) == "```\nx\n```"

    def test_markdown_block_renders_children(self):
        """Test that markdown blocks have no syntax of their own."""
        node = MarkdownBlock(id="b", children=[Heading(depth=3, children=[Text("h")]), Paragraph(children=[Text("p")])])
        assert render(node) == "### h\n\np"

    def test_node_list(self):
        """Test rendering a bare node list."""
        assert render([Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])]) == "a\n\nb"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_ordered_numbering(self):
        """Test sequential numbering from 1."""
        node = List(ordered=True, children=[ListItem(children=[Text(t)]) for t in "abc"])
        assert render(node) == "1. a\n2. b\n3. c"

    def test_ordered_start(self):
        """Test numbering from the list start."""
        node = List(ordered=True, start=4, children=[ListItem(children=[Text("d")]), ListItem(children=[Text("e")])])
        assert render(node) == "4. d\n5. e"

    @pytest.mark.parametrize("bullet", ["-", "*", "+"])
    def test_bullets(self, bullet):
        """Test the configured bullet symbol."""
        node = List(ordered=False, children=[ListItem(children=[Text("a")]), ListItem(children=[Text("b")])])
        assert render(node, bullet_symbol=bullet) == f"{bullet} a\n{bullet} b"

    def test_task_checkboxes(self):
        """Test checkbox output and its option."""
        node = List(
            ordered=False,
            children=[ListItem(checked=True, children=[Text("done")]), ListItem(checked=False, children=[Text("todo")])],
        )
        assert render(node) == "- [x] done\n- [ ] todo"
        assert render(node, render_task_checkboxes=False) == "- done\n- todo"

    def test_nested_blocks_indented(self):
        """Test that nested lists sit under the item text."""
        node = List(
            ordered=True,
            children=[
                ListItem(
                    children=[
                        Paragraph(children=[Text("parent")]),
                        List(ordered=False, children=[ListItem(children=[Text("child")])]),
                    ]
                )
            ],
        )
        assert render(node) == "1. parent\n\n   - child"

    def test_item_paragraphs_blank_line_separated(self):
        """Test that paragraphs in one item stay separate paragraphs."""
        node = List(
            ordered=False,
            children=[
                ListItem(children=[Paragraph(children=[Text("a")]), Paragraph(children=[Text("para2")])]),
                ListItem(children=[Text("b")]),
            ],
        )
        assert render(node) == "- a\n\n  para2\n- b"


@pytest.mark.unit
class TestLeaves:
    """Tests for leaf rendering."""

    @pytest.mark.parametrize(
        "flags,expected",
        [
            ({}, "x"),
            ({"strong": True}, "**x**"),
            ({"emphasis": True}, "*x*"),
            ({"code": True}, "`x`"),
            ({"strong": True, "emphasis": True}, "***x***"),
            ({"strong": True, "code": True}, "`**x**`"),
            ({"emphasis": True, "code": True}, "`*x*`"),
            ({"strong": True, "emphasis": True, "code": True}, "`***x***`"),
        ],
    )
    def test_delimiter_order(self, flags, expected):
        """Test bold, then italic, then code nesting."""
        assert render(Text("x", **flags)) == expected

    def test_empty_leaf(self):
        """Test that an empty leaf has no delimiters."""
        assert render(Text("", strong=True, highlighted=True)) == ""

    def test_flanking_whitespace_outside_delimiters(self):
        """Test that spaces around a formatted run are kept outside its delimiters."""
        assert render(Text(" x ", strong=True)) == " **x** "
        assert render(Text("x  ", emphasis=True, code=True)) == "`*x*`  "
        assert render(Text(" ", strong=True)) == " "
        assert render(Text(" x", highlighted=True, strong=True)) == '<mark type="highlighted"> **x**</mark>'

    def test_strikethrough(self):
        """Test strikethrough output and its option."""
        assert render(Text("x", strikethrough=True, code=True)) == "~~`x`~~"
        assert render(Text("x", strikethrough=True), render_strikethrough=False) == "x"

    def test_underline_has_no_syntax(self):
        """Test that underline is dropped."""
        assert render(Text("x", underline=True)) == "x"

    def test_highlighted(self):
        """Test the highlighted mark wrapper."""
        assert render(Text("x", strong=True, highlighted=True)) == '<mark type="highlighted">**x**</mark>'

    def test_read_only(self):
        """Test the read-only mark wrapper."""
        assert render(Text("x", read_only=True)) == '<mark type="read-only">x</mark>'

    def test_comment_escaped(self):
        """Test that comment text is escaped."""
        leaf = Text("bad text", comment='fix "this" & <that>')
        assert render(leaf) == '<mark type="comment" comment="fix &quot;this&quot; &amp; &lt;that&gt;">bad text</mark>'

    def test_ai_instruction(self):
        """Test the ai-instructions attribute."""
        leaf = Text("t", comment="do", is_instruction_to_ai=True)
        assert render(leaf) == '<mark type="comment" comment="do" ai-instructions="yes">t</mark>'

    def test_only_one_mark_wrapper(self):
        """Test that the highest priority mark wins."""
        assert render(Text("x", highlighted=True, read_only=True, comment="c")) == '<mark type="highlighted">x</mark>'


@pytest.mark.unit
class TestLinksAndChanges:
    """Tests for links and tracked changes."""

    def test_link(self):
        """Test link output and its option."""
        node = Paragraph(children=[Link(url="http://example.com", children=[Text("site", strong=True)])])
        assert render(node) == "[**site**](http://example.com)"
        assert render(node, render_links=False) == "**site**"

    def test_change_tag(self):
        """Test the tag style with and without ids."""
        node = TrackedChange(change_id="c1", change_type="deletion", children=[Paragraph(children=[Text("removed")])])
        assert render(node) == '[change type="deletion"]removed[/change]'
        assert render(node, include_change_ids=True) == '[change type="deletion" id="c1"]removed[/change]'

    def test_change_critic(self):
        """Test the CriticMarkup style."""
        insertion = TrackedChange(change_id="a", change_type="insertion", children=[Paragraph(children=[Text("new")])])
        deletion = TrackedChange(change_id="b", change_type="deletion", children=[Text("old")])
        assert render(insertion, tracked_change_style="critic") == "{++new++}"
        assert render(deletion, tracked_change_style="critic") == "{--old--}"

    def test_change_with_blocks(self):
        """Test that block children are blank-line joined inside the tag."""
        node = TrackedChange(
            change_id="c",
            change_type="insertion",
            children=[Heading(depth=2, children=[Text("h")]), Paragraph(children=[Text("p")])],
        )
        assert render(node) == '[change type="insertion"]## h\n\np[/change]'


@pytest.mark.unit
class TestRendererPlumbing:
    """Tests for options and input validation."""

    def test_wrong_options_type(self):
        """Test that parser options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownRenderer(MarkdownParserOptions())

    def test_non_node_rejected(self):
        """Test that foreign objects raise RenderingError."""
        with pytest.raises(RenderingError):
            MarkdownRenderer().render_to_string({"type": "paragraph"})
        with pytest.raises(RenderingError):
            MarkdownRenderer().render_to_string(Paragraph(children=["raw string"]))
