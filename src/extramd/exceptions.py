"""Custom exceptions for document conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for conversion errors."""


class MalformedDocumentError(ConversionError):
    """Raised when the document tree breaks an assumption the renderer needs.

    For example a list item that points at a list, or a nesting level, the
    document does not define. List numbering cannot be recovered from this.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed document: {reason}")


class BulletOrderError(ConversionError):
    """Raised when asked for the order number of an unregistered paragraph."""

    def __init__(self, paragraph_id: int | None) -> None:
        self.paragraph_id = paragraph_id
        super().__init__(
            f"Paragraph {paragraph_id!r} was not registered with the bullet order "
            "map. Compute the bullet order over every rendered paragraph first."
        )
