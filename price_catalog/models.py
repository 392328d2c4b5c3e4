"""Pydantic models for the price catalog document.

The document is a three-level insertion-ordered mapping::

    {
      "iPhone": {                       # category
        "iPhone 15": {                  # model
          "256GB": {                    # configuration
            "purchase_entry": 999,
            "wholesale_small": null,
            "market": 1099
          }
        }
      }
    }

``PriceEntry`` is the leaf record. ``PriceDocument`` wraps the whole tree and
checks the naming invariants (non-blank names, unique after trimming at each
level) when validating external data. Documents produced by the store are
built with ``model_construct`` so that untouched branches are shared rather
than copied.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    RootModel,
    field_serializer,
    field_validator,
    model_validator,
)

from price_catalog.field_types import OptionalPrice, Price

ConfigMap = dict[str, "PriceEntry"]
ModelMap = dict[str, ConfigMap]
CategoryMap = dict[str, ModelMap]


class PriceEntry(BaseModel):
    """Three price points for one sellable configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    purchase_entry: Price
    wholesale_small: OptionalPrice = None
    market: OptionalPrice = None

    @field_validator("purchase_entry", "wholesale_small", "market", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("price must be a number, not a boolean")
        return value

    @field_serializer("purchase_entry", "wholesale_small", "market")
    def _compact_number(self, value: float | None):
        # 999.0 -> 999 keeps saved files readable
        if value is not None and float(value).is_integer():
            return int(value)
        return value

    @classmethod
    def from_purchase(cls, purchase_price: float) -> PriceEntry:
        return cls(purchase_entry=purchase_price)


def _check_level(names: Iterator[str], path: str) -> list[str]:
    issues: list[str] = []
    seen: dict[str, str] = {}
    for name in names:
        trimmed = name.strip()
        where = f"{path}.{name!r}" if path else repr(name)
        if not trimmed:
            issues.append(f"{where}: name must not be empty")
            continue
        if trimmed in seen:
            issues.append(f"{where}: duplicates {seen[trimmed]!r} after trimming")
        else:
            seen[trimmed] = name
    return issues


def naming_issues(tree: Mapping[str, Mapping[str, Mapping[str, object]]]) -> list[str]:
    """Return naming invariant violations for an already well-shaped tree."""
    issues = _check_level(iter(tree), "")
    for category, models in tree.items():
        issues += _check_level(iter(models), repr(category))
        for model, configs in models.items():
            issues += _check_level(iter(configs), f"{category!r}.{model!r}")
    return issues


class PriceDocument(RootModel[CategoryMap]):
    """Complete catalog: category -> model -> configuration -> PriceEntry."""

    model_config = ConfigDict(frozen=True)

    root: CategoryMap = {}

    @model_validator(mode="after")
    def _check_names(self):  # type: ignore[no-untyped-def]
        issues = naming_issues(self.root)
        if issues:
            raise ValueError("; ".join(issues))
        return self

    # Construction ---------------------------------------------------------
    @classmethod
    def empty(cls) -> PriceDocument:
        return cls.model_construct({})

    @classmethod
    def from_tree(cls, tree: CategoryMap) -> PriceDocument:
        """Wrap an already-typed tree without revalidating or copying it."""
        return cls.model_construct(tree)

    # Queries --------------------------------------------------------------
    def category_names(self) -> list[str]:
        return list(self.root)

    def model_names(self, category: str) -> list[str]:
        return list(self.root.get(category, {}))

    def config_names(self, category: str, model: str) -> list[str]:
        return list(self.root.get(category, {}).get(model, {}))

    def has_category(self, category: str) -> bool:
        return category in self.root

    def has_model(self, category: str, model: str) -> bool:
        return model in self.root.get(category, {})

    def has_config(self, category: str, model: str, config: str) -> bool:
        return config in self.root.get(category, {}).get(model, {})

    def get_entry(self, category: str, model: str, config: str) -> PriceEntry | None:
        return self.root.get(category, {}).get(model, {}).get(config)

    @property
    def is_empty(self) -> bool:
        return not self.root

    def counts(self) -> dict[str, int]:
        models = sum(len(m) for m in self.root.values())
        configs = sum(len(c) for m in self.root.values() for c in m.values())
        return {"categories": len(self.root), "models": models, "configs": configs}

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self.root)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    # Serialization ----------------------------------------------------------
    def to_data(self) -> dict:
        """Plain nested dicts in the document file layout."""
        return self.model_dump()


PriceDocument.model_rebuild()

__all__ = ["PriceEntry", "PriceDocument", "naming_issues", "CategoryMap", "ModelMap", "ConfigMap"]
