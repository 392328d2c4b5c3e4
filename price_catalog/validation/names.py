"""Name checks for categories, models and configurations.

Names are trimmed before comparison and the trimmed form is what the editor
inserts. Existing keys are trimmed too, so " A" and "A" collide; otherwise
duplicate detection is exact and case-sensitive.
"""

from __future__ import annotations

from collections.abc import Iterable

from price_catalog.models import PriceDocument
from price_catalog.validation.issues import IssueCode, ValidationIssue


def normalize_name(name: object) -> str:
    return name.strip() if isinstance(name, str) else ""


def _check_name(
    name: object, existing: Iterable[str], field: str, label: str, scope: str
) -> list[ValidationIssue]:
    trimmed = normalize_name(name)
    if not trimmed:
        return [
            ValidationIssue(
                code=IssueCode.EMPTY,
                field=field,
                message=f"{label} name cannot be empty",
            )
        ]
    if trimmed in {normalize_name(key) for key in existing}:
        return [
            ValidationIssue(
                code=IssueCode.DUPLICATE,
                field=field,
                message=f"{label} '{trimmed}' already exists{scope}",
            )
        ]
    return []


def validate_category_name(
    name: object, existing_category_names: Iterable[str]
) -> list[ValidationIssue]:
    return _check_name(name, existing_category_names, "category", "Category", "")


def validate_model_name(
    name: object, category: str, document: PriceDocument
) -> list[ValidationIssue]:
    return _check_name(
        name,
        document.model_names(category),
        "model",
        "Model",
        " in this category",
    )


def validate_config_name(
    name: object, category: str, model: str, document: PriceDocument
) -> list[ValidationIssue]:
    return _check_name(
        name,
        document.config_names(category, model),
        "config",
        "Configuration",
        " in this model",
    )


__all__ = [
    "normalize_name",
    "validate_category_name",
    "validate_model_name",
    "validate_config_name",
]
