"""Replace a document with the tag page it points at.

Some answer documents are nothing but a link to a tag on LessWrong or the
EA Forum. Those documents are rendered from the tag's description instead
of from their own (empty) body.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .api_types import ElementKind, Paragraph
from .config import Settings, get_settings
from .transport import HttpTagFetcher, TagFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagSite:
    name: str
    pattern: re.Pattern[str]
    setting: str  # name of the Settings field holding the site's base URL


TAG_SITES: tuple[TagSite, ...] = (
    TagSite(
        name="LessWrong",
        pattern=re.compile(
            r"https://(?:www\.)?lesswrong\.com/(?:tag|w)/(?P<slug>[A-Za-z0-9_-]+)"
        ),
        setting="lesswrong_url",
    ),
    TagSite(
        name="the EA Forum",
        pattern=re.compile(
            r"https://forum\.effectivealtruism\.org/(?:topics|tag)/"
            r"(?P<slug>[A-Za-z0-9_-]+)"
        ),
        setting="ea_forum_url",
    ),
)


@dataclass(frozen=True)
class TagContent:
    """Fetched tag content and where it came from."""

    content: str
    source_name: str
    source_url: str

    def attribution(self) -> str:
        return (
            "<i>This text was automatically imported from "
            f"[a tag on {self.source_name}]({self.source_url}).</i>"
        )


def _text_fragments(paragraphs: Iterable[Paragraph]) -> list[str]:
    fragments = []
    for paragraph in paragraphs:
        for element in paragraph.elements:
            run = element.text_run
            if element.kind is not ElementKind.TEXT_RUN or run is None:
                continue
            if run.suggested_insertion_ids or run.suggested_deletion_ids:
                continue
            text = (run.content or "").strip()
            if text:
                fragments.append(text)
    return fragments


async def resolve_external_tag(
    paragraphs: Iterable[Paragraph],
    fetcher: TagFetcher | None = None,
    settings: Settings | None = None,
) -> TagContent | None:
    """Fetch the tag a document consists of, if it is only a tag link.

    The document qualifies when its text runs hold exactly one non-empty
    string and that string is a tag URL on a known site. Without a
    fetcher, an HttpTagFetcher is created for the fetch and closed again.

    Returns:
        The fetched content, or None when the document should be rendered
        normally

    Raises:
        TransportError: If the fetch fails
    """
    fragments = _text_fragments(paragraphs)
    if len(fragments) != 1:
        return None
    (text,) = fragments

    settings = settings or get_settings()
    for site in TAG_SITES:
        match = site.pattern.search(text)
        if match is None:
            continue
        host = getattr(settings, site.setting)
        slug = match.group("slug")
        logger.info("Importing tag %r from %s", slug, site.name)
        if fetcher is not None:
            content = await fetcher.fetch_tag_content(host, slug)
        else:
            http_fetcher = HttpTagFetcher(timeout=settings.fetch_timeout)
            try:
                content = await http_fetcher.fetch_tag_content(host, slug)
            finally:
                await http_fetcher.close()
        return TagContent(
            content=content, source_name=site.name, source_url=match.group(0)
        )
    return None
