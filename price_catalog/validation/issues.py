"""Validation issue model shared by the price and name checks."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class IssueCode(str, Enum):
    MISSING_REQUIRED = "MissingRequired"
    NOT_A_NUMBER = "NotANumber"
    NEGATIVE = "Negative"
    NOT_FINITE = "NotFinite"
    EMPTY = "Empty"
    DUPLICATE = "Duplicate"


class ValidationIssue(BaseModel):
    """One failed rule: machine code, offending field and display message."""

    model_config = ConfigDict(frozen=True)

    code: IssueCode
    field: str
    message: str


def first_message(issues: list[ValidationIssue], default: str = "Validation failed") -> str:
    return issues[0].message if issues else default


def join_messages(issues: list[ValidationIssue]) -> str:
    """All messages as one sentence-separated string ("" when valid)."""
    return ". ".join(issue.message for issue in issues)


__all__ = ["IssueCode", "ValidationIssue", "first_message", "join_messages"]
