"""Google Docs URLs in rendered Markdown."""

from __future__ import annotations

import re
from collections.abc import Mapping

DOCUMENT_URL = re.compile(
    r"https://docs\.google\.com/document/(?:u/\d+/)?d/(?P<document_id>[A-Za-z0-9_-]+)"
)
# The target part of a Markdown link, "(" and ")" included
DOCUMENT_LINK_TARGET = re.compile(r"\(\s*" + DOCUMENT_URL.pattern + r"[^)]*\)")


def extract_document_id(url: str) -> str | None:
    """Google Docs document ID in a URL, if it is a document URL."""
    match = DOCUMENT_URL.search(url)
    return match.group("document_id") if match else None


def replace_document_links(markdown: str, targets: Mapping[str, str]) -> str:
    """Point links to known documents at their published pages.

    Args:
        markdown: Rendered Markdown
        targets: Document ID -> URL to link to instead

    Returns:
        The Markdown with matching link targets replaced. Links to other
        documents, and URLs outside of link syntax, are left alone.
    """

    def _replace(match: re.Match[str]) -> str:
        target = targets.get(match.group("document_id"))
        return match.group(0) if target is None else f"({target})"

    return DOCUMENT_LINK_TARGET.sub(_replace, markdown)
