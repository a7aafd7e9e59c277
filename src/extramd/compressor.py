"""Tidy up rendered Markdown.

The renderer joins every paragraph with a blank line, which leaves lists
loose and runs of empty paragraphs as long stretches of blank lines. The
rules below are applied in order; each is a separate function so it can be
tested on its own. Applying ``compress`` twice gives the same result as
applying it once.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from .elements import EMBED_PATTERN

TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)
EXCESS_NEWLINES = re.compile(r"\n{3,}")
BARE_QUOTE_BEFORE_LIST = re.compile(
    r"^(?:>\n)+(?=>[ \t]*(?:-|\d+\.)[ \t])", re.MULTILINE
)
LIST_ITEM = re.compile(
    r"^(?P<quote>>)?[ \t]*(?:(?P<dash>-)|(?P<number>\d+\.))[ \t]"
)


@dataclass(frozen=True)
class _ListKind:
    quoted: bool
    numbered: bool


def _list_kind(line: str) -> _ListKind | None:
    match = LIST_ITEM.match(line)
    if match is None:
        return None
    return _ListKind(
        quoted=match.group("quote") is not None,
        numbered=match.group("number") is not None,
    )


def _is_blank(line: str) -> bool:
    return line.strip() in ("", ">")


def _continues(line: str, kind: _ListKind | None) -> bool:
    """Whether ``line`` belongs to the list item of the given kind before it."""
    if kind is None or not line:
        return False
    if kind.quoted:
        return line.startswith(">")
    return line[0] in " \t"


def shrink_embeds(markdown: str) -> str:
    """Replace embedded video players with plain links on their own line."""

    def _link(match: re.Match[str]) -> str:
        title = html.unescape(match.group("title"))
        url = f"https://youtu.be/{match.group('video_id')}"
        if match.group("start"):
            url += f"?t={match.group('start')}"
        return f"\n[{title}]({url})\n"

    return EMBED_PATTERN.sub(_link, markdown)


def strip_trailing_whitespace(markdown: str) -> str:
    return TRAILING_WHITESPACE.sub("", markdown)


def collapse_blank_lines(markdown: str) -> str:
    return EXCESS_NEWLINES.sub("\n\n", markdown)


def drop_bare_quote_before_list(markdown: str) -> str:
    """Remove empty ``>`` lines directly above a quoted list item."""
    return BARE_QUOTE_BEFORE_LIST.sub("", markdown)


def drop_blank_lines_between_list_items(markdown: str) -> str:
    """Make lists tight.

    Blank lines (including bare ``>`` lines) are removed between two list
    items of the same kind: dash after dash, number after number, quoted
    after quoted. Lines continuing an item are part of that item.
    """
    out: list[str] = []
    pending: list[str] = []
    current: _ListKind | None = None
    for line in markdown.split("\n"):
        if _is_blank(line):
            pending.append(line)
            continue
        kind = _list_kind(line)
        if kind is not None:
            if not (pending and kind == current):
                out.extend(pending)
            current = kind
        elif _continues(line, current):
            out.extend(pending)
        else:
            out.extend(pending)
            current = None
        pending = []
        out.append(line)
    out.extend(pending)
    return "\n".join(out)


def separate_lists_from_paragraphs(markdown: str) -> str:
    """Put one blank line between the end of a list and what follows it."""
    out: list[str] = []
    current: _ListKind | None = None
    for line in markdown.split("\n"):
        kind = _list_kind(line)
        if _is_blank(line):
            current = None
        elif kind is not None:
            current = kind
        elif not _continues(line, current):
            if current is not None:
                out.append("")
            current = None
        out.append(line)
    return "\n".join(out)


def compress(markdown: str, *, shrink_embeds_over: int | None = None) -> str:
    """Normalise the whitespace of rendered Markdown.

    Args:
        markdown: Rendered Markdown
        shrink_embeds_over: If given and the input is longer than this many
            characters, video embeds are first replaced with plain links

    Returns:
        The compressed Markdown
    """
    if shrink_embeds_over is not None and len(markdown) > shrink_embeds_over:
        markdown = shrink_embeds(markdown)
    markdown = strip_trailing_whitespace(markdown)
    markdown = collapse_blank_lines(markdown)
    markdown = drop_bare_quote_before_list(markdown)
    markdown = drop_blank_lines_between_list_items(markdown)
    return separate_lists_from_paragraphs(markdown)
