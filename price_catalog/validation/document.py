"""Whole-document validation: the single gate for externally loaded data."""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from price_catalog.errors import SchemaError
from price_catalog.models import PriceDocument

logger = logging.getLogger(__name__)


def _format_errors(exc: PydanticValidationError) -> list[str]:
    issues: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        issues.append(f"{loc}: {msg}" if loc else msg)
    return issues


def check_document(candidate: object) -> PriceDocument:
    """Validate ``candidate`` and return it as a typed ``PriceDocument``.

    Raises:
        SchemaError: if any level is not an object, a name is blank or
            duplicated after trimming, or a price entry is invalid.
    """
    if isinstance(candidate, PriceDocument):
        candidate = candidate.to_data()
    if not isinstance(candidate, dict):
        raise SchemaError(
            "Invalid data structure in JSON file",
            issues=[f"document must be an object, got {type(candidate).__name__}"],
        )
    try:
        return PriceDocument.model_validate(candidate)
    except PydanticValidationError as e:
        issues = _format_errors(e)
        logger.debug("Document rejected with %d issue(s): %s", len(issues), issues)
        raise SchemaError("Invalid data structure in JSON file", issues=issues) from e


def document_issues(candidate: object) -> list[str]:
    """Return every reason ``candidate`` is not a valid document (empty if valid)."""
    try:
        check_document(candidate)
    except SchemaError as e:
        return e.issues
    return []


def validate_document(candidate: object) -> bool:
    return not document_issues(candidate)


__all__ = ["check_document", "document_issues", "validate_document"]
