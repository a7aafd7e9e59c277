"""Tables: records for data import, pipe tables for display.

The first row is the header. ``parse_table`` turns every following row into
a dict keyed by the lower-cased header text, which is how the glossary
document is read. ``render_table`` shows the same rows as a Markdown table.
"""

from __future__ import annotations

from collections.abc import Iterator

from .api_types import BlockKind, Paragraph, StructuralElement, Table
from .context import ConversionContext
from .paragraph import render_paragraph


def _paragraphs(blocks: list[StructuralElement]) -> Iterator[Paragraph]:
    for block in blocks:
        if block.kind is BlockKind.PARAGRAPH and block.paragraph is not None:
            yield block.paragraph
        elif block.kind is BlockKind.TABLE and block.table is not None:
            yield from _table_paragraphs(block.table)


def _table_paragraphs(table: Table) -> Iterator[Paragraph]:
    for row in table.table_rows:
        for cell in row.table_cells:
            yield from _paragraphs(cell.content)


def _render_cell(blocks: list[StructuralElement], ctx: ConversionContext) -> str:
    parts: list[str] = []
    for block in blocks:
        if block.kind is BlockKind.PARAGRAPH and block.paragraph is not None:
            parts.append(render_paragraph(block.paragraph, ctx))
        elif block.kind is BlockKind.TABLE and block.table is not None:
            parts.append(render_table(block.table, ctx))
    return "\n".join(part for part in parts if part.strip()).strip()


def table_cells(table: Table, ctx: ConversionContext) -> list[list[str]]:
    """Rendered Markdown of every cell, row by row."""
    cell_ctx = ctx.with_paragraphs(_table_paragraphs(table))
    return [
        [_render_cell(cell.content, cell_ctx) for cell in row.table_cells]
        for row in table.table_rows
    ]


def parse_table(table: Table, ctx: ConversionContext) -> list[dict[str, str]]:
    """Read a table as records keyed by its (lower-cased) header row."""
    rows = table_cells(table, ctx)
    if not rows:
        return []
    headers = [cell.strip().lower() for cell in rows[0]]
    return [dict(zip(headers, row)) for row in rows[1:]]


def _pipe_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", "<br>")


def render_table(table: Table, ctx: ConversionContext) -> str:
    """Render a table as a Markdown pipe table in its own block."""
    rows = table_cells(table, ctx)
    if not rows:
        return ""
    width = max(len(row) for row in rows)
    lines = []
    for i, row in enumerate(rows):
        padded = [_pipe_cell(cell) for cell in row] + [""] * (width - len(row))
        lines.append("| " + " | ".join(padded) + " |")
        if i == 0:
            lines.append("|" + " --- |" * width)
    return "\n\n" + "\n".join(lines) + "\n\n"
