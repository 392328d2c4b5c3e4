"""Catalog store: exclusive owner of the current price document."""

from __future__ import annotations

import logging
from collections.abc import Callable

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
from price_catalog.editing.reducer import reduce
from price_catalog.field_types import PriceField
from price_catalog.models import PriceDocument, PriceEntry

logger = logging.getLogger(__name__)

Listener = Callable[[PriceDocument], None]


class CatalogStore:
    """Holds one ``PriceDocument`` and swaps it atomically per command.

    Commands never raise for bad paths: a failed precondition is a no-op and
    ``apply`` returns the very same document object. Business rules (blank
    names, negative prices) are the caller's job; see
    :mod:`price_catalog.validation`.
    """

    def __init__(self, document: PriceDocument | None = None):
        self._document = document if document is not None else PriceDocument.empty()
        self._listeners: list[Listener] = []

    @property
    def document(self) -> PriceDocument:
        return self._document

    # Dispatch ----------------------------------------------------------------
    def apply(self, command: Command) -> PriceDocument:
        current = self._document
        new = reduce(current, command)
        if new is current:
            logger.debug("No-op %s: precondition not met", command.action)
            return current
        self._document = new
        logger.debug("Applied %s -> %s", command.action, new.counts())
        for listener in list(self._listeners):
            listener(new)
        return new

    # Subscriptions -------------------------------------------------------------
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Convenience wrappers ---------------------------------------------------------
    def set_document(self, document: PriceDocument) -> PriceDocument:
        return self.apply(SetDocument(document=document))

    def update_price(
        self, category: str, model: str, config: str, field: PriceField, value: float | None
    ) -> PriceDocument:
        return self.apply(
            UpdatePrice(category=category, model=model, config=config, field=field, value=value)
        )

    def add_category(self, name: str) -> PriceDocument:
        return self.apply(AddCategory(name=name))

    def delete_category(self, name: str) -> PriceDocument:
        return self.apply(DeleteCategory(name=name))

    def add_model(self, category: str, name: str) -> PriceDocument:
        return self.apply(AddModel(category=category, name=name))

    def delete_model(self, category: str, name: str) -> PriceDocument:
        return self.apply(DeleteModel(category=category, name=name))

    def add_config(self, category: str, model: str, name: str, entry: PriceEntry) -> PriceDocument:
        return self.apply(AddConfig(category=category, model=model, name=name, entry=entry))

    def delete_config(self, category: str, model: str, name: str) -> PriceDocument:
        return self.apply(DeleteConfig(category=category, model=model, name=name))


__all__ = ["CatalogStore", "Listener"]
