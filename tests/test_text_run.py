"""Tests for text run formatting."""

from __future__ import annotations

import pytest
from builders import make_run

from extramd.api_types import Link, TextStyle
from extramd.text_run import format_text_run, is_grey, link_target


class TestFormatTextRun:
    """Tests for format_text_run."""

    @pytest.mark.parametrize("content", ["", "\n"])
    def test_empty_and_newline_render_nothing(self, content: str) -> None:
        """Empty runs and bare newlines produce no output."""
        assert format_text_run(make_run(content)) == ""
        assert format_text_run(make_run(content, bold=True)) == ""

    def test_plain_text(self) -> None:
        assert format_text_run(make_run("Hello World")) == "Hello World"

    def test_bold(self) -> None:
        assert format_text_run(make_run("Hello World", bold=True)) == "**Hello World**"

    def test_italic(self) -> None:
        assert format_text_run(make_run("Hello World", italic=True)) == "*Hello World*"

    def test_bold_and_italic_use_three_asterisks(self) -> None:
        result = format_text_run(make_run("Hello", bold=True, italic=True))
        assert result == "***Hello***"

    def test_false_flags_are_ignored(self) -> None:
        result = format_text_run(make_run("Hello", bold=False, italic=False))
        assert result == "Hello"

    def test_boundary_spaces_move_outside_markers(self) -> None:
        """Spaces around styled text stay outside the markers."""
        result = format_text_run(make_run("  Hello World  ", bold=True))
        assert result == "  **Hello World**  "

    def test_whitespace_only_run_is_kept_without_markers(self) -> None:
        assert format_text_run(make_run("   ", bold=True)) == "   "

    def test_trailing_newline_is_dropped(self) -> None:
        assert format_text_run(make_run("Hello\n", bold=True)) == "**Hello**"

    def test_link(self) -> None:
        result = format_text_run(make_run("click", link="https://example.com"))
        assert result == "[click](https://example.com)"

    def test_bold_link_puts_markers_inside_brackets(self) -> None:
        result = format_text_run(
            make_run(" click ", link="https://example.com", bold=True)
        )
        assert result == " [**click**](https://example.com) "

    def test_underline(self) -> None:
        assert format_text_run(make_run("note", underline=True)) == "<u>note</u>"

    def test_underlined_link_is_not_wrapped(self) -> None:
        """Docs underlines every link; that is not user formatting."""
        result = format_text_run(
            make_run("site", link="https://example.com", underline=True)
        )
        assert result == "[site](https://example.com)"

    def test_html_is_escaped(self) -> None:
        assert format_text_run(make_run("a < b & c")) == "a &lt; b &amp; c"

    def test_leading_quote_marker_is_not_escaped(self) -> None:
        assert format_text_run(make_run("> quoted")) == "> quoted"

    def test_vertical_tab_becomes_newline(self) -> None:
        assert format_text_run(make_run("line one\x0bline two")) == (
            "line one\nline two"
        )

    def test_soft_break_at_end_stays_outside_markers(self) -> None:
        run = make_run("first line\x0b", bold=True)
        assert format_text_run(run) == "**first line**\n"

    def test_soft_break_at_start_stays_outside_markers(self) -> None:
        run = make_run("\x0bsecond", italic=True)
        assert format_text_run(run) == "\n*second*"

    def test_grey_text_is_suppressed(self) -> None:
        assert format_text_run(make_run("editor note", color=(0.5, 0.5, 0.5))) == ""

    @pytest.mark.parametrize("color", [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
    def test_black_and_white_are_not_suppressed(
        self, color: tuple[float, float, float]
    ) -> None:
        assert format_text_run(make_run("visible", color=color)) == "visible"


class TestIsGrey:
    """Tests for the grey colour heuristic."""

    def _style(self, red: float, green: float, blue: float) -> TextStyle:
        style = make_run("x", color=(red, green, blue)).text_style
        assert style is not None
        return style

    def test_mid_grey(self) -> None:
        assert is_grey(self._style(0.6, 0.6, 0.6))

    def test_channels_within_tolerance(self) -> None:
        assert is_grey(self._style(0.6, 0.605, 0.595))

    def test_tinted_colour_is_not_grey(self) -> None:
        assert not is_grey(self._style(0.6, 0.4, 0.6))

    @pytest.mark.parametrize("value", [0.3, 0.93, 0.2, 0.95])
    def test_bounds_are_exclusive(self, value: float) -> None:
        assert not is_grey(self._style(value, value, value))

    def test_missing_channels_count_as_zero(self) -> None:
        style = TextStyle.model_validate(
            {"foregroundColor": {"color": {"rgbColor": {"red": 0.5}}}}
        )
        assert not is_grey(style)

    def test_no_colour(self) -> None:
        assert not is_grey(None)
        assert not is_grey(TextStyle())


class TestLinkTarget:
    def test_url_wins(self) -> None:
        assert link_target(Link(url="https://a.b", heading_id="h.1")) == "https://a.b"

    def test_heading_anchor(self) -> None:
        assert link_target(Link(heading_id="h.abc")) == "#h.abc"

    def test_bookmark_anchor(self) -> None:
        assert link_target(Link(bookmark_id="id.xyz")) == "#id.xyz"

    def test_no_link(self) -> None:
        assert link_target(None) == ""
