"""extramd - Render Google Docs answer documents as Markdown.

Takes the JSON the Google Docs API returns for a document and produces
Markdown for publishing, along with the metadata kept at the bottom of the
document (related documents, alternative phrasings) and a measure of how
many suggested edits are still open.
"""

__version__ = "0.1.0"

from extramd.compressor import compress
from extramd.converter import RenderResult, render_document
from extramd.exceptions import (
    BulletOrderError,
    ConversionError,
    MalformedDocumentError,
)
from extramd.glossary import GlossaryEntry, extract_glossary
from extramd.links import extract_document_id, replace_document_links
from extramd.transport import (
    APIError,
    HttpTagFetcher,
    TagFetcher,
    TagNotFoundError,
    TransportError,
)

__all__ = [
    "APIError",
    "BulletOrderError",
    "ConversionError",
    "GlossaryEntry",
    "HttpTagFetcher",
    "MalformedDocumentError",
    "RenderResult",
    "TagFetcher",
    "TagNotFoundError",
    "TransportError",
    "__version__",
    "compress",
    "extract_document_id",
    "extract_glossary",
    "render_document",
    "replace_document_links",
]
