"""Tests for Google Docs link handling."""

from __future__ import annotations

import pytest

from extramd.links import extract_document_id, replace_document_links

TARGETS = {"doc123": "/?state=A1", "doc456": "/?state=B2"}


class TestExtractDocumentId:
    @pytest.mark.parametrize(
        "url",
        [
            "https://docs.google.com/document/d/doc123/edit",
            "https://docs.google.com/document/u/0/d/doc123/edit?usp=sharing",
            "https://docs.google.com/document/d/doc123",
        ],
    )
    def test_document_urls(self, url: str) -> None:
        assert extract_document_id(url) == "doc123"

    def test_other_urls(self) -> None:
        assert extract_document_id("https://docs.google.com/spreadsheets/d/x") is None
        assert extract_document_id("no url here") is None


class TestReplaceDocumentLinks:
    """Tests for replace_document_links."""

    def test_known_document(self) -> None:
        markdown = "See [this](https://docs.google.com/document/d/doc123/edit)."
        assert replace_document_links(markdown, TARGETS) == "See [this](/?state=A1)."

    def test_user_path_query_and_whitespace(self) -> None:
        markdown = (
            "[a]( https://docs.google.com/document/u/0/d/doc456/edit?usp=sharing )"
        )
        assert replace_document_links(markdown, TARGETS) == "[a](/?state=B2)"

    def test_several_links(self) -> None:
        markdown = (
            "[a](https://docs.google.com/document/d/doc123) and "
            "[b](https://docs.google.com/document/d/doc456/edit#heading=h.1)"
        )
        assert replace_document_links(markdown, TARGETS) == (
            "[a](/?state=A1) and [b](/?state=B2)"
        )

    def test_unknown_document_untouched(self) -> None:
        markdown = "[x](https://docs.google.com/document/d/other/edit)"
        assert replace_document_links(markdown, TARGETS) == markdown

    def test_id_prefix_does_not_match(self) -> None:
        markdown = "[x](https://docs.google.com/document/d/doc1234/edit)"
        assert replace_document_links(markdown, TARGETS) == markdown

    def test_bare_url_untouched(self) -> None:
        markdown = "https://docs.google.com/document/d/doc123/edit"
        assert replace_document_links(markdown, TARGETS) == markdown
