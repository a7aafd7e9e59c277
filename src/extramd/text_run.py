"""Convert a single styled text run into inline Markdown."""

from __future__ import annotations

import html

from .api_types import Link, TextRun, TextStyle

# Mid-grey text is treated as hidden editorial notes
GREY_MIN = 0.3
GREY_MAX = 0.93
GREY_TOLERANCE = 0.01

# Soft line break emitted by Docs (shift+enter)
VERTICAL_TAB = "\x0b"
# Whitespace kept outside the style markers at either end of a run
HOISTED_WHITESPACE = " \t" + VERTICAL_TAB


def is_grey(text_style: TextStyle | None) -> bool:
    """Whether the foreground colour is a mid grey.

    Red must lie strictly between GREY_MIN and GREY_MAX and all three
    channels must agree within GREY_TOLERANCE. Near-black and near-white
    text is not grey.
    """
    if text_style is None or text_style.foreground_color is None:
        return False
    color = text_style.foreground_color.color
    if color is None or color.rgb_color is None:
        return False
    rgb = color.rgb_color
    red = rgb.red or 0.0
    green = rgb.green or 0.0
    blue = rgb.blue or 0.0
    if not GREY_MIN < red < GREY_MAX:
        return False
    return abs(green - red) <= GREY_TOLERANCE and abs(blue - red) <= GREY_TOLERANCE


def link_target(link: Link | None) -> str:
    """URL a link points at, or an in-document anchor, or ""."""
    if link is None:
        return ""
    if link.url:
        return link.url
    if link.heading_id:
        return f"#{link.heading_id}"
    if link.bookmark_id:
        return f"#{link.bookmark_id}"
    return ""


def format_text_run(text_run: TextRun) -> str:
    """Render a text run as Markdown.

    Boundary spaces and soft line breaks are moved outside the style
    markers, since ``**bold **`` does not render as bold. Runs made only of
    whitespace are returned without markers.
    """
    content = text_run.content or ""
    style = text_run.text_style or TextStyle()

    if content in ("", "\n") or is_grey(style):
        return ""

    if content.strip() == "":
        return content.replace(VERTICAL_TAB, "\n")

    leading = content[: len(content) - len(content.lstrip(HOISTED_WHITESPACE))]
    trailing = content[len(content.rstrip(HOISTED_WHITESPACE)) :]
    text = content.strip()
    if not text.startswith(">"):
        text = html.escape(text, quote=False)

    href = link_target(style.link)

    if style.underline and not href:
        text = f"<u>{text}</u>"
    if style.bold:
        text = f"**{text}**"
    if style.italic:
        text = f"*{text}*"
    if href:
        text = f"[{text}]({href})"

    return (leading + text + trailing).replace(VERTICAL_TAB, "\n")
