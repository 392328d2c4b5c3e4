"""Error taxonomy for the price catalog.

Validation and parsing return explicit results for expected bad input; these
exceptions are raised by the convenience layers (``load_document``,
``JsonFile``) and converted to ``ErrorDetail`` by the editor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from price_catalog.validation.issues import ValidationIssue


class CatalogError(Exception):
    """Base class for expected, user-reportable failures."""

    error_type = "CatalogError"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ParseError(CatalogError):
    """Input text is not syntactically valid JSON."""

    error_type = "ParseError"


class SchemaError(CatalogError):
    """Well-formed data that violates the document invariants."""

    error_type = "SchemaError"

    def __init__(self, message: str, issues: list[str] | None = None):
        super().__init__(message)
        self.issues = list(issues or [])


class ValidationError(CatalogError):
    """Business-rule violation on a user-entered name or price."""

    error_type = "ValidationError"

    def __init__(self, issues: list[ValidationIssue]):
        if not issues:
            raise ValueError("ValidationError requires at least one issue")
        super().__init__(issues[0].message, field=issues[0].field)
        self.issues = list(issues)


class NotFoundError(CatalogError):
    """A category/model/config path that must exist does not."""

    error_type = "NotFoundError"


class TransportError(CatalogError):
    """Reading or writing the document file failed."""

    error_type = "TransportError"


__all__ = [
    "CatalogError",
    "ParseError",
    "SchemaError",
    "ValidationError",
    "NotFoundError",
    "TransportError",
]
