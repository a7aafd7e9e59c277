"""Google Docs API types used by the Markdown renderer.

A subset of the Docs API ``Document`` resource, modelled with pydantic so the
raw JSON is validated once when it is ingested. Unknown fields are kept
(``extra="allow"``) so newer API responses still validate.

Paragraph elements and structural elements are tagged at validation time
with an ``ElementKind`` / ``BlockKind``; renderers dispatch on that tag.
"""

from __future__ import annotations

import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from enum import Enum

    class StrEnum(str, Enum):
        """Backport of StrEnum for Python 3.10."""

        pass


from pydantic import BaseModel, ConfigDict, Field, model_validator


class ElementKind(StrEnum):
    """Which variant a ParagraphElement holds."""

    TEXT_RUN = "textRun"
    RICH_LINK = "richLink"
    FOOTNOTE_REFERENCE = "footnoteReference"
    INLINE_OBJECT = "inlineObjectElement"
    HORIZONTAL_RULE = "horizontalRule"
    PAGE_BREAK = "pageBreak"
    TABLE = "table"
    UNKNOWN = "unknown"


class BlockKind(StrEnum):
    """Which variant a StructuralElement holds."""

    PARAGRAPH = "paragraph"
    TABLE = "table"
    FOOTNOTE = "footnote"
    UNKNOWN = "unknown"


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Dimension(_ApiModel):
    """A magnitude in a single direction in the specified units."""

    magnitude: float | None = Field(None)
    unit: str | None = Field(None)


class RgbColor(_ApiModel):
    """An RGB color. Absent channels are 0."""

    blue: float | None = Field(None)
    green: float | None = Field(None)
    red: float | None = Field(None)


class Color(_ApiModel):
    rgb_color: RgbColor | None = Field(None, alias="rgbColor")


class OptionalColor(_ApiModel):
    color: Color | None = Field(None)


class Link(_ApiModel):
    """A reference to another portion of a document or an external URL."""

    url: str | None = Field(None)
    bookmark_id: str | None = Field(None, alias="bookmarkId")
    heading_id: str | None = Field(None, alias="headingId")


class TextStyle(_ApiModel):
    bold: bool | None = Field(None)
    italic: bool | None = Field(None)
    underline: bool | None = Field(None)
    strikethrough: bool | None = Field(None)
    link: Link | None = Field(None)
    foreground_color: OptionalColor | None = Field(None, alias="foregroundColor")
    background_color: OptionalColor | None = Field(None, alias="backgroundColor")
    baseline_offset: str | None = Field(None, alias="baselineOffset")


class _Suggestible(_ApiModel):
    suggested_deletion_ids: list[str] | None = Field(None, alias="suggestedDeletionIds")
    suggested_insertion_ids: list[str] | None = Field(
        None, alias="suggestedInsertionIds"
    )


class TextRun(_Suggestible):
    """A run of text that all has the same styling."""

    content: str | None = Field(None)
    text_style: TextStyle | None = Field(None, alias="textStyle")


class RichLinkProperties(_ApiModel):
    mime_type: str | None = Field(None, alias="mimeType")
    title: str | None = Field(None)
    uri: str | None = Field(None)


class RichLink(_Suggestible):
    """A link to a Google resource (Drive file, YouTube video, ...)."""

    rich_link_id: str | None = Field(None, alias="richLinkId")
    rich_link_properties: RichLinkProperties | None = Field(
        None, alias="richLinkProperties"
    )


class FootnoteReference(_Suggestible):
    footnote_id: str | None = Field(None, alias="footnoteId")
    footnote_number: str | None = Field(None, alias="footnoteNumber")


class InlineObjectElement(_Suggestible):
    inline_object_id: str | None = Field(None, alias="inlineObjectId")


class HorizontalRule(_Suggestible):
    pass


class PageBreak(_Suggestible):
    pass


class ParagraphElement(_ApiModel):
    """Content within a Paragraph. Exactly one variant field is set."""

    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")
    text_run: TextRun | None = Field(None, alias="textRun")
    rich_link: RichLink | None = Field(None, alias="richLink")
    footnote_reference: FootnoteReference | None = Field(
        None, alias="footnoteReference"
    )
    inline_object_element: InlineObjectElement | None = Field(
        None, alias="inlineObjectElement"
    )
    horizontal_rule: HorizontalRule | None = Field(None, alias="horizontalRule")
    page_break: PageBreak | None = Field(None, alias="pageBreak")
    table: Table | None = Field(None)
    kind: ElementKind = Field(ElementKind.UNKNOWN, exclude=True)

    @model_validator(mode="after")
    def _tag(self) -> ParagraphElement:
        for kind, value in (
            (ElementKind.TEXT_RUN, self.text_run),
            (ElementKind.RICH_LINK, self.rich_link),
            (ElementKind.FOOTNOTE_REFERENCE, self.footnote_reference),
            (ElementKind.INLINE_OBJECT, self.inline_object_element),
            (ElementKind.HORIZONTAL_RULE, self.horizontal_rule),
            (ElementKind.PAGE_BREAK, self.page_break),
            (ElementKind.TABLE, self.table),
        ):
            if value is not None:
                self.kind = kind
                break
        return self

    @property
    def payload(self) -> _Suggestible | Table | None:
        """The variant value selected by ``kind``."""
        return {
            ElementKind.TEXT_RUN: self.text_run,
            ElementKind.RICH_LINK: self.rich_link,
            ElementKind.FOOTNOTE_REFERENCE: self.footnote_reference,
            ElementKind.INLINE_OBJECT: self.inline_object_element,
            ElementKind.HORIZONTAL_RULE: self.horizontal_rule,
            ElementKind.PAGE_BREAK: self.page_break,
            ElementKind.TABLE: self.table,
        }.get(self.kind)


class ParagraphStyle(_ApiModel):
    named_style_type: str | None = Field(None, alias="namedStyleType")
    indent_start: Dimension | None = Field(None, alias="indentStart")
    indent_first_line: Dimension | None = Field(None, alias="indentFirstLine")
    heading_id: str | None = Field(None, alias="headingId")


class Bullet(_ApiModel):
    """Describes the bullet of a paragraph."""

    list_id: str | None = Field(None, alias="listId")
    nesting_level: int | None = Field(None, alias="nestingLevel")


class Paragraph(_ApiModel):
    """A range of content terminated with a newline character."""

    bullet: Bullet | None = Field(None)
    elements: list[ParagraphElement] = Field(default_factory=list)
    paragraph_style: ParagraphStyle | None = Field(None, alias="paragraphStyle")


class TableCell(_ApiModel):
    content: list[StructuralElement] = Field(default_factory=list)
    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")


class TableRow(_ApiModel):
    table_cells: list[TableCell] = Field(default_factory=list, alias="tableCells")
    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")


class Table(_Suggestible):
    columns: int | None = Field(None)
    rows: int | None = Field(None)
    table_rows: list[TableRow] = Field(default_factory=list, alias="tableRows")


class Footnote(_ApiModel):
    """A document footnote."""

    content: list[StructuralElement] = Field(default_factory=list)
    footnote_id: str | None = Field(None, alias="footnoteId")


class StructuralElement(_ApiModel):
    """Content that provides structure to the document."""

    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")
    paragraph: Paragraph | None = Field(None)
    table: Table | None = Field(None)
    footnote: Footnote | None = Field(None)
    kind: BlockKind = Field(BlockKind.UNKNOWN, exclude=True)

    @model_validator(mode="after")
    def _tag(self) -> StructuralElement:
        if self.paragraph is not None:
            self.kind = BlockKind.PARAGRAPH
        elif self.table is not None:
            self.kind = BlockKind.TABLE
        elif self.footnote is not None:
            self.kind = BlockKind.FOOTNOTE
        return self


class NestingLevel(_ApiModel):
    """Look and feel of a list bullet at a given level of nesting."""

    glyph_format: str | None = Field(None, alias="glyphFormat")
    glyph_symbol: str | None = Field(None, alias="glyphSymbol")
    glyph_type: str | None = Field(None, alias="glyphType")
    start_number: int | None = Field(None, alias="startNumber")

    @property
    def is_ordered(self) -> bool:
        """Ordered levels carry a glyph type; unordered ones a glyph symbol."""
        return self.glyph_type is not None and self.glyph_type != (
            "GLYPH_TYPE_UNSPECIFIED"
        )


class ListProperties(_ApiModel):
    nesting_levels: list[NestingLevel] = Field(
        default_factory=list, alias="nestingLevels"
    )


class List(_ApiModel):
    """List attributes shared by all paragraphs with the same list ID."""

    list_properties: ListProperties | None = Field(None, alias="listProperties")


class ImageProperties(_ApiModel):
    content_uri: str | None = Field(None, alias="contentUri")
    source_uri: str | None = Field(None, alias="sourceUri")


class EmbeddedObject(_ApiModel):
    description: str | None = Field(None)
    title: str | None = Field(None)
    image_properties: ImageProperties | None = Field(None, alias="imageProperties")


class InlineObjectProperties(_ApiModel):
    embedded_object: EmbeddedObject | None = Field(None, alias="embeddedObject")


class InlineObject(_ApiModel):
    """An object that appears inline with text, such as an image."""

    object_id: str | None = Field(None, alias="objectId")
    inline_object_properties: InlineObjectProperties | None = Field(
        None, alias="inlineObjectProperties"
    )


class Body(_ApiModel):
    content: list[StructuralElement] = Field(default_factory=list)


class Document(_ApiModel):
    """A Google Docs document."""

    document_id: str | None = Field(None, alias="documentId")
    title: str | None = Field(None)
    body: Body = Field(default_factory=Body)
    footnotes: dict[str, Footnote] = Field(default_factory=dict)
    lists: dict[str, List] = Field(default_factory=dict)
    inline_objects: dict[str, InlineObject] = Field(
        default_factory=dict, alias="inlineObjects"
    )
    named_styles: dict[str, object] | None = Field(None, alias="namedStyles")


ParagraphElement.model_rebuild()
TableCell.model_rebuild()
Footnote.model_rebuild()
StructuralElement.model_rebuild()
