"""Text transport for the price document (JSON in, JSON out).

``parse`` only checks syntax and hands back an untrusted candidate; callers
must run :func:`price_catalog.validation.check_document` before the
candidate reaches the store. ``load_document`` bundles both steps.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from typing import Any

from price_catalog.errors import ParseError
from price_catalog.models import PriceDocument
from price_catalog.settings import DEFAULT_FILENAME_PREFIX
from price_catalog.validation.document import check_document

MALFORMED_MESSAGE = "Invalid JSON format"


@dataclass(frozen=True)
class ParseResult:
    data: Any = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.data


def _reject_constant(token: str):
    raise ValueError(f"non-standard JSON constant {token}")


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate key {key!r}")
        obj[key] = value
    return obj


def parse(raw_text: str | bytes) -> ParseResult:
    """Parse JSON text into an unvalidated candidate document."""
    try:
        if isinstance(raw_text, bytes):
            raw_text = raw_text.decode("utf-8-sig")
        data = json.loads(
            raw_text,
            object_pairs_hook=_unique_keys,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as e:  # JSONDecodeError/UnicodeDecodeError are ValueErrors
        return ParseResult(error=ParseError(f"{MALFORMED_MESSAGE}: {e}"))
    return ParseResult(data=data)


def serialize(document: PriceDocument, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Pretty-printed JSON in insertion order, ending with a newline."""
    return json.dumps(document.to_data(), indent=indent, ensure_ascii=ensure_ascii) + "\n"


def load_document(raw_text: str | bytes) -> PriceDocument:
    """Parse and validate in one step.

    Raises:
        ParseError: text is not valid JSON.
        SchemaError: JSON does not describe a valid price document.
    """
    return check_document(parse(raw_text).unwrap())


def default_filename(today: date | None = None, prefix: str = DEFAULT_FILENAME_PREFIX) -> str:
    day = today or date.today()
    return f"{prefix}-{day.isoformat()}.json"


__all__ = [
    "ParseResult",
    "parse",
    "serialize",
    "load_document",
    "default_filename",
    "MALFORMED_MESSAGE",
]
