"""Convert a Google Docs document to Markdown.

The document body is split into its sections, the content section is
rendered paragraph by paragraph and the footnote definitions are appended.
A document that is nothing but a link to a forum tag is replaced with the
tag's own text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .api_types import BlockKind, Document, Paragraph, StructuralElement
from .config import Settings, get_settings
from .context import ConversionContext
from .footnotes import render_footnotes
from .paragraph import render_paragraph
from .segmenter import alternative_phrasings, related_document_ids, segment_document
from .tags import resolve_external_tag
from .transport import TagFetcher

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


@dataclass
class RenderResult:
    """Rendered Markdown and the metadata collected along the way."""

    markdown: str
    related_document_ids: list[str] = field(default_factory=list)
    alternative_phrasings: list[str] = field(default_factory=list)
    # Number of distinct suggestions, and their total rendered length
    suggestion_count: int = 0
    suggestion_size: int = 0


def content_paragraphs(blocks: list[StructuralElement]) -> list[Paragraph]:
    paragraphs = []
    for block in blocks:
        if block.kind is BlockKind.PARAGRAPH and block.paragraph is not None:
            paragraphs.append(block.paragraph)
        elif block.kind is BlockKind.UNKNOWN:
            logger.debug("Skipping unsupported block at %s", block.start_index)
    return paragraphs


def render_body(document: Document, paragraphs: list[Paragraph]) -> RenderResult:
    """Render paragraphs and footnotes, counting suggestions."""
    ctx = ConversionContext.for_document(document, paragraphs)
    body = PARAGRAPH_SEPARATOR.join(
        render_paragraph(paragraph, ctx) for paragraph in paragraphs
    )
    footnotes = render_footnotes(document.footnotes, ctx)
    return RenderResult(
        markdown=body + PARAGRAPH_SEPARATOR + footnotes,
        suggestion_count=ctx.suggestions.count,
        suggestion_size=ctx.suggestions.size,
    )


async def render_document(
    document: dict[str, Any] | Document,
    *,
    fetcher: TagFetcher | None = None,
    settings: Settings | None = None,
) -> RenderResult:
    """Render a Google Docs document to Markdown.

    Args:
        document: Raw document JSON from Google Docs API, or a parsed Document
        fetcher: Fetcher for tag pages; an HttpTagFetcher is created (and
            closed again) only when the document is a tag link
        settings: Settings to use instead of the environment's

    Returns:
        RenderResult with the uncompressed Markdown

    Raises:
        MalformedDocumentError: If a list item references an undefined list
        TransportError: If fetching a tag page fails
    """
    if not isinstance(document, Document):
        document = Document.model_validate(document)
    settings = settings or get_settings()

    segments = segment_document(document.body.content)
    related = related_document_ids(segments.related)
    phrasings = alternative_phrasings(segments.alternative_phrasings)
    paragraphs = content_paragraphs(segments.content)

    tag = await resolve_external_tag(paragraphs, fetcher, settings)

    if tag is not None:
        result = RenderResult(
            markdown=tag.attribution() + PARAGRAPH_SEPARATOR + tag.content
        )
    else:
        result = render_body(document, paragraphs)

    result.related_document_ids = related
    result.alternative_phrasings = phrasings
    logger.debug(
        "Rendered %s: %d characters, %d suggestions",
        document.document_id,
        len(result.markdown),
        result.suggestion_count,
    )
    return result
