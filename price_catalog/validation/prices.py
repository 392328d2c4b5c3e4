"""Price value checks."""

from __future__ import annotations

import math
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from price_catalog.models import PriceEntry
from price_catalog.validation.issues import IssueCode, ValidationIssue


def is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_finite(value: int | float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:  # int too large for a float
        return False


def is_valid_price_entry(candidate: object) -> bool:
    """Structural check of a single PriceEntry candidate (mapping input only)."""
    if not isinstance(candidate, Mapping):
        return False
    try:
        PriceEntry.model_validate(dict(candidate))
    except PydanticValidationError:
        return False
    return True


def validate_price_value(
    value: object, required: bool = False, field: str = "price"
) -> list[ValidationIssue]:
    """Check one user-entered price; an empty list means the value is acceptable.

    ``None`` stands for "not set". Negative values report ``Negative`` only,
    even when they are also infinite.
    """
    issues: list[ValidationIssue] = []
    if value is None:
        if required:
            issues.append(
                ValidationIssue(
                    code=IssueCode.MISSING_REQUIRED,
                    field=field,
                    message="This field is required",
                )
            )
        return issues

    if not is_number(value):
        issues.append(
            ValidationIssue(
                code=IssueCode.NOT_A_NUMBER, field=field, message="Value must be a number"
            )
        )
    elif value < 0:  # type: ignore[operator]
        issues.append(
            ValidationIssue(
                code=IssueCode.NEGATIVE, field=field, message="Price cannot be negative"
            )
        )
    elif not _is_finite(value):  # type: ignore[arg-type]
        issues.append(
            ValidationIssue(
                code=IssueCode.NOT_FINITE,
                field=field,
                message="Value must be a finite number",
            )
        )
    return issues


def coerce_price_input(raw: object) -> object:
    """Turn text typed into a price box into a price candidate.

    Blank text means "not set" (``None``); numeric text becomes ``float``.
    Anything unparseable is returned unchanged so that
    :func:`validate_price_value` reports it as not a number.
    """
    if not isinstance(raw, str):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return raw


__all__ = [
    "is_number",
    "is_valid_price_entry",
    "validate_price_value",
    "coerce_price_input",
]
