"""Reusable Annotated field type aliases for price catalog models.

Keeping the field-level constraints here lets the validation helpers and the
command models share them without importing the document model.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import Field

# ---------------------------------------------------------------------------
# Field names (fixed by the document file format)
# ---------------------------------------------------------------------------
PriceField = Literal["purchase_entry", "wholesale_small", "market"]

PRICE_FIELDS: tuple[str, ...] = ("purchase_entry", "wholesale_small", "market")
REQUIRED_PRICE_FIELDS: frozenset[str] = frozenset({"purchase_entry"})

# ---------------------------------------------------------------------------
# Annotated aliases
# ---------------------------------------------------------------------------
Price = Annotated[
    float,
    Field(
        strict=True,  # no bools, no numeric strings
        ge=0,
        allow_inf_nan=False,
        description="Finite, non-negative price.",
        examples=[999, 1099.5],
    ),
]

# Constraints sit on the inner type so they apply only when a value is present.
OptionalPrice = Optional[Price]

EntryName = Annotated[
    str,
    Field(
        description="Category, model or configuration name (compared after trimming).",
        examples=["iPhone", "iPhone 15", "256GB"],
    ),
]

__all__ = [
    "PriceField",
    "PRICE_FIELDS",
    "REQUIRED_PRICE_FIELDS",
    "Price",
    "OptionalPrice",
    "EntryName",
]
