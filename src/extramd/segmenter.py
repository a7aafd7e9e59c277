"""Split a document body into its named sections.

Answer documents keep their metadata at the bottom, introduced by a
paragraph whose whole text is a section name:

    <answer text>
    Related
    <links to other answer documents>
    Alternative phrasings
    <one phrasing per paragraph>
    Scratchpad
    <editor notes, never published>

Matching is exact after trimming, lower-casing and dropping a trailing
colon. A section runs until the next header or the end of the document.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .api_types import BlockKind, ElementKind, StrEnum, StructuralElement
from .links import extract_document_id


class Section(StrEnum):
    CONTENT = "content"
    RELATED = "related"
    ALTERNATIVE_PHRASINGS = "alternative phrasings"
    SCRATCHPAD = "scratchpad"


SECTION_HEADERS: dict[str, Section] = {
    "related": Section.RELATED,
    "alternative phrasings": Section.ALTERNATIVE_PHRASINGS,
    "alternate phrasings": Section.ALTERNATIVE_PHRASINGS,
    "scratchpad": Section.SCRATCHPAD,
}


@dataclass
class Segments:
    """Blocks of each section, in document order."""

    content: list[StructuralElement] = field(default_factory=list)
    related: list[StructuralElement] = field(default_factory=list)
    alternative_phrasings: list[StructuralElement] = field(default_factory=list)
    scratchpad: list[StructuralElement] = field(default_factory=list)

    def blocks(self, section: Section) -> list[StructuralElement]:
        return {
            Section.CONTENT: self.content,
            Section.RELATED: self.related,
            Section.ALTERNATIVE_PHRASINGS: self.alternative_phrasings,
            Section.SCRATCHPAD: self.scratchpad,
        }[section]


def block_text(block: StructuralElement) -> str:
    """All text-run content of a paragraph block, trimmed."""
    if block.kind is not BlockKind.PARAGRAPH or block.paragraph is None:
        return ""
    return "".join(
        element.text_run.content or ""
        for element in block.paragraph.elements
        if element.kind is ElementKind.TEXT_RUN and element.text_run is not None
    ).strip()


def section_header(block: StructuralElement) -> Section | None:
    text = block_text(block).lower()
    if text.endswith(":"):
        text = text[:-1]
    return SECTION_HEADERS.get(text)


def segment_document(blocks: Iterable[StructuralElement]) -> Segments:
    segments = Segments()
    current = Section.CONTENT
    for block in blocks:
        header = section_header(block)
        if header is not None:
            current = header
            continue
        segments.blocks(current).append(block)
    return segments


def _block_link(block: StructuralElement) -> str | None:
    if block.kind is not BlockKind.PARAGRAPH or block.paragraph is None:
        return None
    if not block.paragraph.elements:
        return None
    first = block.paragraph.elements[0]
    if first.kind is ElementKind.RICH_LINK and first.rich_link is not None:
        props = first.rich_link.rich_link_properties
        return props.uri if props else None
    if first.kind is ElementKind.TEXT_RUN and first.text_run is not None:
        style = first.text_run.text_style
        if style is not None and style.link is not None:
            return style.link.url
    return None


def related_document_ids(blocks: Iterable[StructuralElement]) -> list[str]:
    """Document IDs linked from the related section.

    Each block contributes the document its first element links to, either
    a rich link chip or a plain hyperlink. Anything else is ignored.
    """
    ids: list[str] = []
    for block in blocks:
        url = _block_link(block)
        document_id = extract_document_id(url) if url else None
        if document_id:
            ids.append(document_id)
    return ids


def alternative_phrasings(blocks: Iterable[StructuralElement]) -> list[str]:
    return [text for text in (block_text(block) for block in blocks) if text]
