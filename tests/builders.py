"""Builders for Docs API JSON used across the tests."""

from __future__ import annotations

from typing import Any

from extramd.api_types import Document, Paragraph, ParagraphElement, TextRun
from extramd.context import ConversionContext

_next_index = [1]


def _index(start: int | None) -> int:
    if start is not None:
        return start
    _next_index[0] += 10
    return _next_index[0]


def text_run(
    content: str,
    *,
    start: int | None = None,
    link: str | None = None,
    color: tuple[float, float, float] | None = None,
    insertion: str | None = None,
    deletion: str | None = None,
    **style: Any,
) -> dict[str, Any]:
    """A textRun paragraph element. Extra keywords become textStyle fields."""
    text_style: dict[str, Any] = dict(style)
    if link is not None:
        text_style["link"] = {"url": link}
    if color is not None:
        red, green, blue = color
        text_style["foregroundColor"] = {
            "color": {"rgbColor": {"red": red, "green": green, "blue": blue}}
        }
    run: dict[str, Any] = {"content": content, "textStyle": text_style}
    if insertion:
        run["suggestedInsertionIds"] = [insertion]
    if deletion:
        run["suggestedDeletionIds"] = [deletion]
    return {"startIndex": _index(start), "textRun": run}


def rich_link(uri: str, title: str | None = None, **kwargs: Any) -> dict[str, Any]:
    props: dict[str, Any] = {"uri": uri}
    if title is not None:
        props["title"] = title
    return {
        "startIndex": _index(kwargs.get("start")),
        "richLink": {"richLinkProperties": props},
    }


def paragraph(
    *elements: dict[str, Any],
    bullet: tuple[str, int] | None = None,
    named_style: str = "NORMAL_TEXT",
    indent: float | None = None,
) -> dict[str, Any]:
    style: dict[str, Any] = {"namedStyleType": named_style}
    if indent is not None:
        style["indentStart"] = {"magnitude": indent, "unit": "PT"}
    para: dict[str, Any] = {"elements": list(elements), "paragraphStyle": style}
    if bullet is not None:
        list_id, level = bullet
        para["bullet"] = {"listId": list_id, "nestingLevel": level}
    return {"paragraph": para}


def text_paragraph(text: str, **kwargs: Any) -> dict[str, Any]:
    return paragraph(text_run(text + "\n"), **kwargs)


def table(*rows: list[str]) -> dict[str, Any]:
    """A table block whose cells each hold one plain paragraph."""
    return {
        "table": {
            "rows": len(rows),
            "columns": max((len(row) for row in rows), default=0),
            "tableRows": [
                {"tableCells": [{"content": [text_paragraph(cell)]} for cell in row]}
                for row in rows
            ],
        }
    }


def bulleted_list(ordered: bool, levels: int = 3) -> dict[str, Any]:
    if ordered:
        level: dict[str, Any] = {"glyphType": "DECIMAL", "glyphFormat": "%0."}
    else:
        level = {"glyphSymbol": "●"}
    return {"listProperties": {"nestingLevels": [dict(level) for _ in range(levels)]}}


def document(*blocks: dict[str, Any], **fields: Any) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "documentId": fields.pop("document_id", "doc-1"),
        "title": "Test Document",
        "body": {"content": list(blocks)},
    }
    doc.update(fields)
    return doc


def make_run(content: str, **kwargs: Any) -> TextRun:
    run = ParagraphElement.model_validate(text_run(content, **kwargs)).text_run
    assert run is not None
    return run


def make_paragraph(*elements: dict[str, Any], **kwargs: Any) -> Paragraph:
    return Paragraph.model_validate(paragraph(*elements, **kwargs)["paragraph"])


def make_context(
    paragraphs: list[Paragraph] | None = None, **fields: Any
) -> ConversionContext:
    """Context for a document with the given top-level fields."""
    doc = Document.model_validate(document(**fields))
    return ConversionContext.for_document(doc, paragraphs or [])
