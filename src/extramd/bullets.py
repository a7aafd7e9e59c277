"""Sequence numbers for ordered list items.

Numbering must follow document order, not the order paragraphs happen to be
rendered in, so it is computed up front over the complete paragraph list:

    order = compute_bullet_order(paragraphs)
    order(paragraph)  # -> 1-based position within (listId, nestingLevel)

Paragraphs are identified by the start index of their first element, which
the Docs API guarantees to be unique within a document.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import NewType

from .api_types import Paragraph
from .exceptions import BulletOrderError

ParagraphId = NewType("ParagraphId", int)


def paragraph_id(paragraph: Paragraph) -> ParagraphId | None:
    """Stable identity of a paragraph within its document."""
    if not paragraph.elements:
        return None
    start = paragraph.elements[0].start_index
    return None if start is None else ParagraphId(start)


class BulletOrder:
    """Lookup from paragraph identity to its list position."""

    def __init__(self, positions: dict[ParagraphId | None, int]) -> None:
        self._positions = positions

    def __call__(self, paragraph: Paragraph) -> int:
        key = paragraph_id(paragraph)
        try:
            return self._positions[key]
        except KeyError:
            raise BulletOrderError(key) from None

    def __contains__(self, paragraph: object) -> bool:
        return (
            isinstance(paragraph, Paragraph)
            and paragraph_id(paragraph) in self._positions
        )

    def __len__(self) -> int:
        return len(self._positions)


def compute_bullet_order(paragraphs: Iterable[Paragraph]) -> BulletOrder:
    """Number every bulleted paragraph within its (listId, nestingLevel) group.

    Separate lists, and separate levels of one list, count independently
    from 1. Paragraphs without a bullet are skipped.
    """
    counters: defaultdict[tuple[str | None, int], int] = defaultdict(int)
    positions: dict[ParagraphId | None, int] = {}

    for paragraph in paragraphs:
        bullet = paragraph.bullet
        if bullet is None:
            continue
        group = (bullet.list_id, bullet.nesting_level or 0)
        counters[group] += 1
        positions[paragraph_id(paragraph)] = counters[group]

    return BulletOrder(positions)
