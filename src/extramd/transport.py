"""Transport layer for fetching tag pages from the forum sites.

Defines the TagFetcher protocol and its production implementation:
- HttpTagFetcher: queries a site's GraphQL endpoint over httpx
"""

from __future__ import annotations

import json
import logging
import re
import ssl
from abc import ABC, abstractmethod
from typing import Any

import certifi
import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

_TAG_QUERY = (
    '{{tag(input:{{selector:{{slug:"{slug}"}}}})'
    "{{result{{description{{markdown html}}}}}}}}"
)

# ^[\[1\]](#fn0f5x8s34vee)^  ->  [^0f5x8s34vee]
FOOTNOTE_MARKER = re.compile(r"\^\[\\\[\d+\\\]\]\(#fn(?P<id>[A-Za-z0-9]+)\)\^")
# 1.  ^**[^](#fnref0f5x8s34vee)**^\n    \n    ->  [^0f5x8s34vee]:
FOOTNOTE_DEFINITION = re.compile(
    r"^\d+\.  \^\*\*\[\^\]\(#fnref(?P<id>[A-Za-z0-9]+)\)\*\*\^\n    \n    ",
    re.MULTILINE,
)


class TransportError(Exception):
    """Base exception for transport errors."""


class TagNotFoundError(TransportError):
    """Raised when the site has no such tag (404)."""


class APIError(TransportError):
    """Raised when the API returns an error."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def convert_forum_footnotes(markdown: str) -> str:
    """Rewrite the forums' footnote syntax as standard Markdown footnotes."""
    markdown = FOOTNOTE_MARKER.sub(r"[^\g<id>]", markdown)
    return FOOTNOTE_DEFINITION.sub(r"[^\g<id>]: ", markdown)


def _description(payload: dict[str, Any]) -> dict[str, Any]:
    data = payload.get("data") or {}
    # Older deployments answer with a list of matches
    results = (data.get("tags") or {}).get("results") or []
    tag = results[0] if results else (data.get("tag") or {}).get("result")
    return (tag or {}).get("description") or {}


class TagFetcher(ABC):
    """Abstract base class for fetching tag content.

    Implementations return the Markdown body of a tag page on a
    tag-hosting site.
    """

    @abstractmethod
    async def fetch_tag_content(self, host: str, slug: str) -> str:
        """Fetch a tag's description.

        Args:
            host: Base URL of the site, e.g. "https://www.lesswrong.com"
            slug: The tag's URL slug

        Returns:
            The description as Markdown, "" if the tag has none
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        ...


class HttpTagFetcher(TagFetcher):
    """Production fetcher that queries the site's GraphQL API."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds
            client: Client to use instead of a new one; it is still closed
                by ``close``
        """
        if client is None:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            client = httpx.AsyncClient(
                timeout=timeout,
                verify=ssl_context,
                headers={"Accept": "application/json"},
            )
        self._client = client

    async def fetch_tag_content(self, host: str, slug: str) -> str:
        url = f"{host.rstrip('/')}/graphql"
        payload = await self._request(url, {"query": _TAG_QUERY.format(slug=slug)})
        description = _description(payload)
        markdown = description.get("markdown") or description.get("html") or ""
        if not markdown:
            logger.warning("Tag %r on %s has no description", slug, host)
        return convert_forum_footnotes(markdown)

    async def _request(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        """Make a GET request and decode the JSON body."""
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            result: dict[str, Any] = response.json()
            return result
        except httpx.HTTPStatusError as e:
            self._handle_http_error(e)
            raise  # unreachable, but makes type checker happy
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e
        except json.JSONDecodeError as e:
            raise TransportError(f"Invalid JSON from {url}: {e}") from e

    def _handle_http_error(self, e: httpx.HTTPStatusError) -> None:
        """Handle HTTP errors and raise appropriate exceptions."""
        status = e.response.status_code
        if status == 404:
            raise TagNotFoundError(f"Tag not found at {e.request.url}") from e
        body = e.response.text
        raise APIError(f"API error ({status}): {body}", status_code=status) from e

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
