"""Store command models.

Each structural edit is a small frozen pydantic model tagged by ``action``;
``Command`` is their discriminated union. Commands carry already-validated
arguments: the store applies them without re-checking business rules.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from price_catalog.field_types import EntryName, PriceField
from price_catalog.models import PriceDocument, PriceEntry


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetDocument(_Command):
    action: Literal["set_document"] = "set_document"
    document: PriceDocument


class UpdatePrice(_Command):
    action: Literal["update_price"] = "update_price"
    category: str
    model: str
    config: str
    field: PriceField
    value: float | None


class AddCategory(_Command):
    action: Literal["add_category"] = "add_category"
    name: EntryName


class DeleteCategory(_Command):
    action: Literal["delete_category"] = "delete_category"
    name: str


class AddModel(_Command):
    action: Literal["add_model"] = "add_model"
    category: str
    name: EntryName


class DeleteModel(_Command):
    action: Literal["delete_model"] = "delete_model"
    category: str
    name: str


class AddConfig(_Command):
    action: Literal["add_config"] = "add_config"
    category: str
    model: str
    name: EntryName
    entry: PriceEntry


class DeleteConfig(_Command):
    action: Literal["delete_config"] = "delete_config"
    category: str
    model: str
    name: str


Command = Annotated[
    SetDocument
    | UpdatePrice
    | AddCategory
    | DeleteCategory
    | AddModel
    | DeleteModel
    | AddConfig
    | DeleteConfig,
    Field(discriminator="action"),
]

_CommandAdapter = TypeAdapter(Command)


def parse_command(data: dict) -> Command:
    """Coerce a raw dict payload (e.g. from a UI event) into a Command."""
    return _CommandAdapter.validate_python(data)


def example_commands() -> list[dict]:
    return [
        {"action": "add_category", "name": "iPhone"},
        {"action": "add_model", "category": "iPhone", "name": "iPhone 15"},
        {
            "action": "add_config",
            "category": "iPhone",
            "model": "iPhone 15",
            "name": "256GB",
            "entry": {"purchase_entry": 999, "wholesale_small": None, "market": None},
        },
        {
            "action": "update_price",
            "category": "iPhone",
            "model": "iPhone 15",
            "config": "256GB",
            "field": "market",
            "value": 1099,
        },
        {"action": "delete_config", "category": "iPhone", "model": "iPhone 15", "name": "256GB"},
        {"action": "delete_model", "category": "iPhone", "name": "iPhone 15"},
        {"action": "delete_category", "name": "iPhone"},
    ]


__all__ = [
    "SetDocument",
    "UpdatePrice",
    "AddCategory",
    "DeleteCategory",
    "AddModel",
    "DeleteModel",
    "AddConfig",
    "DeleteConfig",
    "Command",
    "parse_command",
    "example_commands",
]
