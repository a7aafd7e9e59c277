"""Render paragraph elements to inline Markdown.

``render_element`` dispatches on the element's kind and records the size of
any suggested edit on the context. Suggested insertions are left out of the
output; suggested deletions are still shown.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Sequence

from .api_types import (
    ElementKind,
    FootnoteReference,
    InlineObjectElement,
    Paragraph,
    ParagraphElement,
    RichLink,
)
from .context import ConversionContext
from .text_run import format_text_run

logger = logging.getLogger(__name__)

YOUTUBE_URL = re.compile(
    r"^(https?:)?//(www\.)?youtube\.com/watch\?v=(?P<video_id>[A-Za-z0-9_-]+)"
)
YOUTUBE_SHORT_URL = re.compile(
    r"^(https?:)?//(www\.)?youtu\.be/(?P<video_id>[A-Za-z0-9_-]+)"
)
_START_TIME = re.compile(r"[?&](?:t|start)=(?P<seconds>\d+)")

_EMBED_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; "
    "picture-in-picture; web-share"
)
EMBED_TEMPLATE = (
    '<div class="video-embed" style="position:relative;padding-bottom:56.25%;'
    'height:0;overflow:hidden">'
    '<iframe src="https://www.youtube.com/embed/{video_id}{query}" title="{title}" '
    'style="position:absolute;top:0;left:0;width:100%;height:100%" '
    f'frameborder="0" allow="{_EMBED_ALLOW}" allowfullscreen></iframe></div>'
)
# Matches the output of EMBED_TEMPLATE
EMBED_PATTERN = re.compile(
    r'<div class="video-embed"[^>]*>'
    r'<iframe src="https://www\.youtube\.com/embed/(?P<video_id>[A-Za-z0-9_-]+)'
    r'(?:\?start=(?P<start>\d+))?" title="(?P<title>[^"]*)"[^>]*></iframe></div>'
)


def _link_url(element: ParagraphElement) -> str:
    if element.kind is not ElementKind.TEXT_RUN or element.text_run is None:
        return ""
    style = element.text_run.text_style
    if style is None or style.link is None:
        return ""
    return style.link.url or ""


def merge_same_link_elements(
    elements: Sequence[ParagraphElement],
) -> list[ParagraphElement]:
    """Join adjacent text runs that link to the same URL.

    Docs splits one hyperlink into several runs whenever the styling of part
    of it differs; rendered separately they would become several links.
    The input elements are not modified.
    """
    merged: list[ParagraphElement] = []
    for element in elements:
        url = _link_url(element)
        run = element.text_run
        previous = merged[-1] if merged else None
        if (
            previous is not None
            and previous.text_run is not None
            and run is not None
            and url
            and url == _link_url(previous)
            and not run.suggested_insertion_ids
        ):
            content = (previous.text_run.content or "") + (run.content or "")
            merged[-1] = previous.model_copy(
                update={
                    "text_run": previous.text_run.model_copy(
                        update={"content": content}
                    )
                }
            )
        else:
            merged.append(element)
    return merged


def youtube_video_id(uri: str) -> str | None:
    match = YOUTUBE_URL.match(uri) or YOUTUBE_SHORT_URL.match(uri)
    return match.group("video_id") if match else None


def render_rich_link(rich_link: RichLink, *, in_list: bool = False) -> str:
    """Render a rich link chip.

    YouTube links outside of list items become an embedded player followed
    by a paragraph break, since some renderers ignore anything sharing a line
    with an iframe.
    """
    props = rich_link.rich_link_properties
    uri = (props.uri if props else None) or ""
    title = (props.title if props else None) or uri

    video_id = youtube_video_id(uri)
    if video_id and not in_list:
        start = _START_TIME.search(uri)
        query = f"?start={start.group('seconds')}" if start else ""
        embed = EMBED_TEMPLATE.format(
            video_id=video_id, query=query, title=html.escape(title, quote=True)
        )
        return embed + "\n\n"
    return f"[{title}]({uri})"


def render_footnote_reference(reference: FootnoteReference) -> str:
    return f"[^{reference.footnote_id}]"


def render_inline_object(element: InlineObjectElement, ctx: ConversionContext) -> str:
    """Render an inline image, on its own line."""
    object_id = element.inline_object_id or ""
    inline_object = ctx.inline_objects.get(object_id)
    props = inline_object.inline_object_properties if inline_object else None
    embedded = props.embedded_object if props else None
    if embedded is None or embedded.image_properties is None:
        logger.warning("Inline object %r has no image, skipping", object_id)
        return ""

    image = embedded.image_properties
    url = image.content_uri or image.source_uri or ""
    alt = embedded.description or ""
    title = ""
    if embedded.title:
        escaped = embedded.title.replace('"', '\\"')
        title = f' "{escaped}"'
    return f"\n![{alt}]({url}{title})\n"


def render_horizontal_rule() -> str:
    return "___"


def render_page_break() -> str:
    return "\n\n"


def render_element(
    element: ParagraphElement,
    ctx: ConversionContext,
    paragraph: Paragraph | None = None,
) -> str:
    """Render one paragraph element, tracking suggested edits.

    Args:
        element: The element to render
        ctx: Conversion context; its suggestion tracker is updated
        paragraph: The enclosing paragraph, if any

    Returns:
        Markdown for the element, "" for unknown elements and suggested
        insertions
    """
    kind = element.kind
    if kind is ElementKind.TEXT_RUN and element.text_run:
        md = format_text_run(element.text_run)
    elif kind is ElementKind.RICH_LINK and element.rich_link:
        in_list = paragraph is not None and paragraph.bullet is not None
        md = render_rich_link(element.rich_link, in_list=in_list)
    elif kind is ElementKind.FOOTNOTE_REFERENCE and element.footnote_reference:
        md = render_footnote_reference(element.footnote_reference)
    elif kind is ElementKind.INLINE_OBJECT and element.inline_object_element:
        md = render_inline_object(element.inline_object_element, ctx)
    elif kind is ElementKind.HORIZONTAL_RULE:
        md = render_horizontal_rule()
    elif kind is ElementKind.PAGE_BREAK:
        md = render_page_break()
    elif kind is ElementKind.TABLE and element.table:
        # tables imports this module
        from .tables import render_table

        md = render_table(element.table, ctx)
    else:
        logger.debug(
            "Skipping unsupported paragraph element at %s", element.start_index
        )
        return ""

    payload = element.payload
    if payload is not None and payload.suggested_insertion_ids:
        ctx.suggestions.add_insertion(payload.suggested_insertion_ids[0], len(md))
        return ""
    if payload is not None and payload.suggested_deletion_ids:
        ctx.suggestions.add_deletion(payload.suggested_deletion_ids[0], len(md))
    return md
