"""Per-document state shared by the renderers.

A fresh ConversionContext is built for every document. It carries the
document-level maps the renderers look things up in, the bullet order
computed before rendering, and the suggestion tracker that element
rendering writes to.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field

from .api_types import Document, Footnote, InlineObject, List, Paragraph
from .bullets import BulletOrder, compute_bullet_order


@dataclass
class SuggestionSize:
    """Rendered length of the text a suggestion inserts and deletes."""

    insertions: int = 0
    deletions: int = 0


class SuggestionTracker:
    """Accumulates suggestion sizes keyed by suggestion ID."""

    def __init__(self) -> None:
        self._sizes: dict[str, SuggestionSize] = {}

    def add_insertion(self, suggestion_id: str, amount: int) -> None:
        self._sizes.setdefault(suggestion_id, SuggestionSize()).insertions += amount

    def add_deletion(self, suggestion_id: str, amount: int) -> None:
        self._sizes.setdefault(suggestion_id, SuggestionSize()).deletions += amount

    def get(self, suggestion_id: str) -> SuggestionSize | None:
        return self._sizes.get(suggestion_id)

    def __len__(self) -> int:
        return len(self._sizes)

    @property
    def count(self) -> int:
        """Number of distinct suggestions seen."""
        return len(self._sizes)

    @property
    def size(self) -> int:
        """Total suggestion size.

        A replacement both inserts and deletes text; only the larger side
        is counted.
        """
        return sum(max(s.insertions, s.deletions) for s in self._sizes.values())


@dataclass
class ConversionContext:
    """Tracks state during conversion of one document."""

    lists: dict[str, List] = field(default_factory=dict)
    inline_objects: dict[str, InlineObject] = field(default_factory=dict)
    footnotes: dict[str, Footnote] = field(default_factory=dict)
    bullet_order: BulletOrder = field(default_factory=lambda: BulletOrder({}))
    suggestions: SuggestionTracker = field(default_factory=SuggestionTracker)

    @classmethod
    def for_document(
        cls, document: Document, paragraphs: Iterable[Paragraph]
    ) -> ConversionContext:
        """Build the context, numbering lists over ``paragraphs`` in order."""
        return cls(
            lists=document.lists,
            inline_objects=document.inline_objects,
            footnotes=document.footnotes,
            bullet_order=compute_bullet_order(paragraphs),
        )

    def with_paragraphs(self, paragraphs: Iterable[Paragraph]) -> ConversionContext:
        """Same document and tracker, list numbering over other paragraphs."""
        return dataclasses.replace(
            self, bullet_order=compute_bullet_order(paragraphs)
        )
