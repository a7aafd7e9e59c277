"""Render one paragraph as a Markdown block.

Output is composed as ``indent + list marker + quote marker + heading
marker + inline content``; continuation lines inside the paragraph are
re-indented to line up under the first.
"""

from __future__ import annotations

import re

from .api_types import Bullet, NestingLevel, Paragraph, ParagraphStyle
from .context import ConversionContext
from .elements import merge_same_link_elements, render_element
from .exceptions import MalformedDocumentError

HEADING_STYLE = re.compile(r"^HEADING_(?P<level>[1-6])$")

# Indentation (pt) at which a plain paragraph is rendered as a block quote.
# One press of the indent button is 36pt.
BLOCKQUOTE_INDENT = 18.0

LIST_INDENT = "    "


def heading_prefix(style: ParagraphStyle | None) -> str:
    named_style = style.named_style_type if style else None
    match = HEADING_STYLE.match(named_style or "")
    if not match:
        return ""
    return "#" * int(match.group("level")) + " "


def is_block_quote(style: ParagraphStyle | None) -> bool:
    if style is None or style.indent_start is None:
        return False
    return (style.indent_start.magnitude or 0.0) >= BLOCKQUOTE_INDENT


def nesting_level_definition(bullet: Bullet, ctx: ConversionContext) -> NestingLevel:
    """Look up the list level a bullet belongs to.

    Raises:
        MalformedDocumentError: If the list or the level is not defined
    """
    level = bullet.nesting_level or 0
    list_def = ctx.lists.get(bullet.list_id or "")
    if list_def is None:
        raise MalformedDocumentError(f"list {bullet.list_id!r} is not defined")
    levels = list_def.list_properties.nesting_levels if list_def.list_properties else []
    if level >= len(levels):
        raise MalformedDocumentError(
            f"list {bullet.list_id!r} has no nesting level {level}"
        )
    return levels[level]


def render_paragraph(paragraph: Paragraph, ctx: ConversionContext) -> str:
    """Render a paragraph, or return "" if nothing visible is left in it."""
    elements = merge_same_link_elements(paragraph.elements)
    body = "".join(render_element(element, ctx, paragraph) for element in elements)
    if not body.strip():
        return ""

    style = paragraph.paragraph_style
    prefix = heading_prefix(style)

    if paragraph.bullet is not None:
        bullet = paragraph.bullet
        definition = nesting_level_definition(bullet, ctx)
        if definition.is_ordered:
            marker = f"{ctx.bullet_order(paragraph)}. "
        else:
            marker = "- "
        leading_space = LIST_INDENT * (bullet.nesting_level or 0)
        continuation = "\n" + leading_space + LIST_INDENT
        return leading_space + marker + prefix + body.replace("\n", continuation)

    if is_block_quote(style):
        return "> " + prefix + body.replace("\n", "\n> ")

    return prefix + body
