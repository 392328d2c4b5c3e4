"""Pure copy-on-write reducer: ``(document, command) -> document``.

Every effective change builds a fresh top-level mapping plus fresh copies of
the category, model and entry on the edited path; all other branches are
reused by identity. A command whose precondition fails returns the input
document object unchanged.
"""

from __future__ import annotations

from price_catalog.editing.commands import (
    AddCategory,
    AddConfig,
    AddModel,
    Command,
    DeleteCategory,
    DeleteConfig,
    DeleteModel,
    SetDocument,
    UpdatePrice,
)
from price_catalog.models import PriceDocument


def _without(mapping: dict, key: str) -> dict:
    return {k: v for k, v in mapping.items() if k != key}


def _update_price(doc: PriceDocument, cmd: UpdatePrice) -> PriceDocument:
    entry = doc.get_entry(cmd.category, cmd.model, cmd.config)
    if entry is None:
        return doc
    root = doc.root
    category = root[cmd.category]
    model = category[cmd.model]
    new_entry = entry.model_copy(update={cmd.field: cmd.value})
    new_model = {**model, cmd.config: new_entry}
    new_category = {**category, cmd.model: new_model}
    return PriceDocument.from_tree({**root, cmd.category: new_category})


def _add_category(doc: PriceDocument, cmd: AddCategory) -> PriceDocument:
    if doc.has_category(cmd.name):
        return doc
    return PriceDocument.from_tree({**doc.root, cmd.name: {}})


def _delete_category(doc: PriceDocument, cmd: DeleteCategory) -> PriceDocument:
    if not doc.has_category(cmd.name):
        return doc
    return PriceDocument.from_tree(_without(doc.root, cmd.name))


def _add_model(doc: PriceDocument, cmd: AddModel) -> PriceDocument:
    if not doc.has_category(cmd.category) or doc.has_model(cmd.category, cmd.name):
        return doc
    root = doc.root
    new_category = {**root[cmd.category], cmd.name: {}}
    return PriceDocument.from_tree({**root, cmd.category: new_category})


def _delete_model(doc: PriceDocument, cmd: DeleteModel) -> PriceDocument:
    if not doc.has_model(cmd.category, cmd.name):
        return doc
    root = doc.root
    new_category = _without(root[cmd.category], cmd.name)
    return PriceDocument.from_tree({**root, cmd.category: new_category})


def _add_config(doc: PriceDocument, cmd: AddConfig) -> PriceDocument:
    if not doc.has_model(cmd.category, cmd.model):
        return doc
    if doc.has_config(cmd.category, cmd.model, cmd.name):
        return doc
    root = doc.root
    category = root[cmd.category]
    new_model = {**category[cmd.model], cmd.name: cmd.entry}
    new_category = {**category, cmd.model: new_model}
    return PriceDocument.from_tree({**root, cmd.category: new_category})


def _delete_config(doc: PriceDocument, cmd: DeleteConfig) -> PriceDocument:
    if not doc.has_config(cmd.category, cmd.model, cmd.name):
        return doc
    root = doc.root
    category = root[cmd.category]
    new_model = _without(category[cmd.model], cmd.name)
    new_category = {**category, cmd.model: new_model}
    return PriceDocument.from_tree({**root, cmd.category: new_category})


def reduce(document: PriceDocument, command: Command) -> PriceDocument:
    if isinstance(command, SetDocument):
        return command.document
    if isinstance(command, UpdatePrice):
        return _update_price(document, command)
    if isinstance(command, AddCategory):
        return _add_category(document, command)
    if isinstance(command, DeleteCategory):
        return _delete_category(document, command)
    if isinstance(command, AddModel):
        return _add_model(document, command)
    if isinstance(command, DeleteModel):
        return _delete_model(document, command)
    if isinstance(command, AddConfig):
        return _add_config(document, command)
    if isinstance(command, DeleteConfig):
        return _delete_config(document, command)
    raise TypeError(f"Unknown command: {command!r}")


__all__ = ["reduce"]
