"""User-intent orchestration for the price catalog editor.

Each intent runs the relevant validation, stops at the first failure, awaits
the confirmation gate for deletions, and only then issues a store command.
Every intent returns an :class:`Outcome`; nothing is partially applied.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from price_catalog.confirmation import ConfirmationGate, ConfirmFn
from price_catalog.errors import CatalogError, NotFoundError, ValidationError
from price_catalog.field_types import PRICE_FIELDS, REQUIRED_PRICE_FIELDS
from price_catalog.models import PriceDocument, PriceEntry
from price_catalog.settings import EditorSettings, configure_logging
from price_catalog.storage.json_file import JsonFile
from price_catalog.storage.transport import default_filename, load_document, serialize
from price_catalog.store import CatalogStore
from price_catalog.validation import (
    coerce_price_input,
    normalize_name,
    validate_category_name,
    validate_config_name,
    validate_model_name,
    validate_price_value,
)

logger = logging.getLogger(__name__)

Action = Literal[
    "load_file",
    "save_file",
    "add_category",
    "add_model",
    "add_config",
    "update_price",
    "delete_category",
    "delete_model",
    "delete_config",
]


class ErrorDetail(BaseModel):
    """Structured error information for a failed intent."""

    type: str
    message: str
    field: str | None = None


class Outcome(BaseModel):
    ok: bool
    action: Action
    message: str
    error: ErrorDetail | None = None


class SaveOutcome(Outcome):
    action: Action = "save_file"
    text: str | None = None
    filename: str | None = None
    path: str | None = None


class PriceEditor:
    """Drives the catalog store from user intents.

    Args:
        store: catalog store to edit (a fresh empty one by default).
        confirm: async yes/no gate awaited before deletions.
        notify: optional callback receiving every outcome (toast hook).
        settings: save/serialization settings.
    """

    def __init__(
        self,
        store: CatalogStore | None = None,
        confirm: ConfirmFn | None = None,
        notify: Callable[[Outcome], None] | None = None,
        settings: EditorSettings | None = None,
    ):
        configure_logging()
        self.store = store if store is not None else CatalogStore()
        self.confirm = confirm if confirm is not None else ConfirmationGate()
        self.notify = notify
        self.settings = settings or EditorSettings()

    @property
    def document(self) -> PriceDocument:
        return self.store.document

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def _report(self, outcome: Outcome) -> Outcome:
        if outcome.ok:
            logger.info("%s: %s", outcome.action, outcome.message)
        else:
            logger.info("%s failed: %s", outcome.action, outcome.message)
        if self.notify is not None:
            self.notify(outcome)
        return outcome

    def _success(self, action: Action, message: str) -> Outcome:
        return self._report(Outcome(ok=True, action=action, message=message))

    def _failure(self, action: Action, exc: CatalogError) -> Outcome:
        detail = ErrorDetail(type=exc.error_type, message=exc.message, field=exc.field)
        return self._report(
            Outcome(ok=False, action=action, message=exc.message, error=detail)
        )

    # ------------------------------------------------------------------
    # File intents
    # ------------------------------------------------------------------
    def load_file(self, raw_text: str | bytes) -> Outcome:
        try:
            document = load_document(raw_text)
        except CatalogError as e:
            return self._failure("load_file", e)
        self.store.set_document(document)
        return self._success("load_file", "File loaded successfully")

    def load_path(self, path: str | Path) -> Outcome:
        try:
            text = JsonFile(path).read_text()
        except CatalogError as e:
            return self._failure("load_file", e)
        return self.load_file(text)

    def _render(self, today: date | None) -> SaveOutcome:
        document = self.document
        if document.is_empty and not self.settings.allow_empty_save:
            exc = CatalogError("No data to save")
            return SaveOutcome(
                ok=False,
                message=exc.message,
                error=ErrorDetail(type=exc.error_type, message=exc.message),
            )
        text = serialize(
            document, indent=self.settings.indent, ensure_ascii=self.settings.ensure_ascii
        )
        return SaveOutcome(
            ok=True,
            message="File saved successfully",
            text=text,
            filename=default_filename(today, self.settings.filename_prefix),
        )

    def save_file(self, today: date | None = None) -> SaveOutcome:
        """Serialize the current document; the caller hands the text to the user."""
        outcome = self._render(today)
        self._report(outcome)
        return outcome

    def save_path(self, target: str | Path | None = None, today: date | None = None) -> SaveOutcome:
        """Save to ``target``; a directory (or ``None`` for cwd) gets the default filename.

        A path ending in a separator names a directory, created if missing.
        """
        outcome = self._render(today)
        if outcome.ok and outcome.text is not None:
            as_directory = target is None or str(target).endswith(("/", os.sep))
            target = Path.cwd() if target is None else Path(target)
            if as_directory or target.is_dir():
                json_file = JsonFile.for_directory(target, today, self.settings.filename_prefix)
            else:
                json_file = JsonFile(target)
            try:
                written = json_file.write_text(outcome.text)
            except CatalogError as e:
                outcome = SaveOutcome(
                    ok=False,
                    message=e.message,
                    error=ErrorDetail(type=e.error_type, message=e.message),
                )
            else:
                outcome = outcome.model_copy(
                    update={"path": str(written), "filename": written.name}
                )
        self._report(outcome)
        return outcome

    # ------------------------------------------------------------------
    # Structural intents
    # ------------------------------------------------------------------
    def add_category(self, name: str) -> Outcome:
        issues = validate_category_name(name, self.document.category_names())
        if issues:
            return self._failure("add_category", ValidationError(issues))
        self.store.add_category(normalize_name(name))
        return self._success("add_category", "Category added")

    def add_model(self, category: str, name: str) -> Outcome:
        document = self.document
        issues = validate_model_name(name, category, document)
        if issues:
            return self._failure("add_model", ValidationError(issues))
        if not document.has_category(category):
            return self._failure(
                "add_model", NotFoundError(f"Category '{category}' not found", field="category")
            )
        self.store.add_model(category, normalize_name(name))
        return self._success("add_model", "Model added")

    def add_config(self, category: str, model: str, name: str, purchase_price) -> Outcome:
        document = self.document
        issues = validate_config_name(name, category, model, document)
        if issues:
            return self._failure("add_config", ValidationError(issues))
        price = coerce_price_input(purchase_price)
        issues = validate_price_value(price, required=True, field="purchase_entry")
        if issues:
            return self._failure("add_config", ValidationError(issues))
        if not document.has_model(category, model):
            return self._failure(
                "add_config",
                NotFoundError(f"Model '{model}' not found in category '{category}'", field="model"),
            )
        entry = PriceEntry(purchase_entry=price)  # type: ignore[arg-type]
        self.store.add_config(category, model, normalize_name(name), entry)
        return self._success("add_config", "Configuration added")

    def update_price(self, category: str, model: str, config: str, field: str, value) -> Outcome:
        if field not in PRICE_FIELDS:
            return self._failure(
                "update_price", CatalogError(f"Unknown price field '{field}'", field=field)
            )
        value = coerce_price_input(value)
        issues = validate_price_value(value, required=field in REQUIRED_PRICE_FIELDS, field=field)
        if issues:
            return self._failure("update_price", ValidationError(issues))
        if not self.document.has_config(category, model, config):
            return self._failure(
                "update_price",
                NotFoundError(f"Configuration '{category}/{model}/{config}' not found", field="config"),
            )
        self.store.update_price(category, model, config, field, value)  # type: ignore[arg-type]
        return self._success("update_price", "Price updated")

    # ------------------------------------------------------------------
    # Destructive intents
    # ------------------------------------------------------------------
    async def _delete(self, action: Action, message: str, command: Callable[[], object]) -> Outcome:
        # absent paths are idempotent no-ops, still reported as success
        if not await self.confirm():
            return self._report(Outcome(ok=False, action=action, message="Deletion cancelled"))
        command()
        return self._success(action, message)

    async def delete_category(self, name: str) -> Outcome:
        return await self._delete(
            "delete_category", "Category deleted", lambda: self.store.delete_category(name)
        )

    async def delete_model(self, category: str, name: str) -> Outcome:
        return await self._delete(
            "delete_model", "Model deleted", lambda: self.store.delete_model(category, name)
        )

    async def delete_config(self, category: str, model: str, name: str) -> Outcome:
        return await self._delete(
            "delete_config",
            "Configuration deleted",
            lambda: self.store.delete_config(category, model, name),
        )


__all__ = ["PriceEditor", "Outcome", "SaveOutcome", "ErrorDetail"]
