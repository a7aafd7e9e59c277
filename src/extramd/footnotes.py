"""Footnote definitions block."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .api_types import BlockKind, Footnote, Paragraph
from .context import ConversionContext
from .paragraph import render_paragraph

FOOTNOTE_CONTINUATION = "\n    "


def footnote_paragraphs(footnote: Footnote) -> Iterator[Paragraph]:
    for block in footnote.content:
        if block.kind is BlockKind.PARAGRAPH and block.paragraph is not None:
            yield block.paragraph


def render_footnotes(footnotes: Mapping[str, Footnote], ctx: ConversionContext) -> str:
    """Render every footnote as a ``[^id]:`` definition, in map order.

    Paragraphs after the first are indented so they stay in the footnote.
    Each footnote is its own index segment, so lists inside it are numbered
    separately.
    """
    definitions = []
    for footnote_id, footnote in footnotes.items():
        paragraphs = list(footnote_paragraphs(footnote))
        footnote_ctx = ctx.with_paragraphs(paragraphs)
        body = FOOTNOTE_CONTINUATION.join(
            render_paragraph(paragraph, footnote_ctx) for paragraph in paragraphs
        )
        definitions.append(f"[^{footnote_id}]:{body}")
    return "\n".join(definitions)
