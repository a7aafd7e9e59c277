"""Tests for paragraph rendering."""

from __future__ import annotations

import pytest
from builders import bulleted_list, make_context, make_paragraph, text_run

from extramd.api_types import Paragraph
from extramd.exceptions import MalformedDocumentError
from extramd.paragraph import heading_prefix, render_paragraph

LISTS = {"dash": bulleted_list(ordered=False), "num": bulleted_list(ordered=True)}


def _render(paragraph: Paragraph, lists: dict | None = None) -> str:
    ctx = make_context([paragraph], lists=LISTS if lists is None else lists)
    return render_paragraph(paragraph, ctx)


class TestRenderParagraph:
    """Tests for render_paragraph."""

    def test_plain_paragraph(self) -> None:
        paragraph = make_paragraph(
            text_run("Hello "), text_run("world", bold=True), text_run("\n")
        )
        assert _render(paragraph) == "Hello **world**"

    def test_empty_paragraph_renders_nothing(self) -> None:
        assert _render(make_paragraph(text_run("\n"))) == ""

    def test_grey_only_paragraph_renders_nothing(self) -> None:
        paragraph = make_paragraph(
            text_run("note\n", color=(0.5, 0.5, 0.5)), bullet=("dash", 0)
        )
        assert _render(paragraph) == ""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_headings(self, level: int) -> None:
        paragraph = make_paragraph(
            text_run("Title\n"), named_style=f"HEADING_{level}"
        )
        assert _render(paragraph) == "#" * level + " Title"

    def test_title_style_is_not_a_heading(self) -> None:
        paragraph = make_paragraph(text_run("Title\n"), named_style="TITLE")
        assert _render(paragraph) == "Title"

    def test_unordered_list_item(self) -> None:
        paragraph = make_paragraph(text_run("item\n"), bullet=("dash", 0))
        assert _render(paragraph) == "- item"

    def test_ordered_list_item(self) -> None:
        paragraph = make_paragraph(text_run("item\n"), bullet=("num", 0))
        assert _render(paragraph) == "1. item"

    def test_ordered_list_uses_document_order(self) -> None:
        first = make_paragraph(text_run("one\n", start=1), bullet=("num", 0))
        second = make_paragraph(text_run("two\n", start=10), bullet=("num", 0))
        ctx = make_context([first, second], lists=LISTS)

        assert render_paragraph(second, ctx) == "2. two"
        assert render_paragraph(first, ctx) == "1. one"

    def test_unspecified_glyph_type_is_unordered(self) -> None:
        lists = {
            "l": {
                "listProperties": {
                    "nestingLevels": [{"glyphType": "GLYPH_TYPE_UNSPECIFIED"}]
                }
            }
        }
        paragraph = make_paragraph(text_run("item\n"), bullet=("l", 0))
        assert _render(paragraph, lists) == "- item"

    def test_heading_inside_nested_list_item(self) -> None:
        paragraph = make_paragraph(
            text_run("Title\n"), bullet=("dash", 1), named_style="HEADING_1"
        )
        assert _render(paragraph) == "    - # Title"

    def test_list_item_continuation_lines_are_indented(self) -> None:
        paragraph = make_paragraph(
            text_run("first\x0bsecond\n"), bullet=("dash", 1)
        )
        assert _render(paragraph) == "    - first\n        second"

    def test_block_quote(self) -> None:
        paragraph = make_paragraph(text_run("quoted\x0bmore\n"), indent=36)
        assert _render(paragraph) == "> quoted\n> more"

    def test_small_indent_is_not_a_quote(self) -> None:
        paragraph = make_paragraph(text_run("text\n"), indent=10)
        assert _render(paragraph) == "text"

    def test_undefined_list_raises(self) -> None:
        paragraph = make_paragraph(text_run("item\n"), bullet=("nope", 0))
        with pytest.raises(MalformedDocumentError, match="nope"):
            _render(paragraph)

    def test_undefined_nesting_level_raises(self) -> None:
        lists = {"short": bulleted_list(ordered=True, levels=1)}
        paragraph = make_paragraph(text_run("item\n"), bullet=("short", 2))
        with pytest.raises(MalformedDocumentError, match="nesting level 2"):
            _render(paragraph, lists)


class TestHeadingPrefix:
    def test_no_style(self) -> None:
        assert heading_prefix(None) == ""
