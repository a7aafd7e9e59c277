"""Read glossary entries from the glossary document.

The glossary is kept as the first table of a document, with a header row
naming the columns ``term``, ``aliases``, ``definition`` and ``question``.
The question column links to the answer document explaining the term.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .api_types import BlockKind, Document, Table
from .context import ConversionContext
from .links import extract_document_id
from .tables import parse_table

logger = logging.getLogger(__name__)

ALIAS_SEPARATOR = re.compile(r"[,\n]")


@dataclass
class GlossaryEntry:
    term: str
    aliases: list[str] = field(default_factory=list)
    definition: str = ""
    question_doc_id: str | None = None


def first_table(document: Document) -> Table | None:
    for block in document.body.content:
        if block.kind is BlockKind.TABLE and block.table is not None:
            return block.table
    return None


def _aliases(text: str) -> list[str]:
    aliases = (html.unescape(alias).strip() for alias in ALIAS_SEPARATOR.split(text))
    return [alias for alias in aliases if alias]


def extract_glossary(document: dict[str, Any] | Document) -> list[GlossaryEntry]:
    """Parse the glossary table of a document.

    Rows without a term are skipped. Returns an empty list if the document
    has no table.
    """
    if not isinstance(document, Document):
        document = Document.model_validate(document)
    table = first_table(document)
    if table is None:
        logger.warning("Document %s has no glossary table", document.document_id)
        return []

    ctx = ConversionContext.for_document(document, [])
    entries = []
    for record in parse_table(table, ctx):
        term = html.unescape(record.get("term", "")).strip()
        if not term:
            continue
        question = record.get("question", "")
        question_doc_id = extract_document_id(question)
        if question and question_doc_id is None:
            logger.warning("Glossary term %r links to no document", term)
        entries.append(
            GlossaryEntry(
                term=term,
                definition=record.get("definition", "").strip(),
                aliases=_aliases(record.get("aliases", "")),
                question_doc_id=question_doc_id,
            )
        )
    return entries
