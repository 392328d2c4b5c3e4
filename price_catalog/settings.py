"""Editor settings and logging setup.

Settings are plain values with environment overrides:

* ``PRICE_CATALOG_LOG_LEVEL`` -> logging level (default ``WARNING``)
* ``PRICE_CATALOG_FILENAME_PREFIX`` -> save filename prefix (default ``price-config``)
* ``PRICE_CATALOG_INDENT`` -> JSON indentation (default ``2``)
* ``PRICE_CATALOG_ALLOW_EMPTY_SAVE`` -> ``1/true/yes`` to permit saving an empty catalog
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "PRICE_CATALOG_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DEFAULT_FILENAME_PREFIX = "price-config"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def configure_logging():  # lightweight, idempotent
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        return
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    configure_logging._done = True  # type: ignore[attr-defined]


@dataclass(frozen=True)
class EditorSettings:
    """Tunable behaviour of the editor and file transport.

    Attributes
    ----------
    filename_prefix : str
        Prefix of the suggested save filename (``<prefix>-YYYY-MM-DD.json``).
    indent : int
        Spaces per indentation level in saved JSON.
    ensure_ascii : bool
        Escape non-ASCII characters in saved JSON.
    allow_empty_save : bool
        Permit saving a catalog without categories.
    """

    filename_prefix: str = DEFAULT_FILENAME_PREFIX
    indent: int = 2
    ensure_ascii: bool = False
    allow_empty_save: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        if not self.filename_prefix.strip():
            raise ValueError("filename_prefix must not be empty")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> EditorSettings:
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if prefix := env.get("PRICE_CATALOG_FILENAME_PREFIX"):
            kwargs["filename_prefix"] = prefix
        if indent := env.get("PRICE_CATALOG_INDENT"):
            try:
                kwargs["indent"] = int(indent)
            except ValueError as e:
                raise ValueError(f"PRICE_CATALOG_INDENT must be an integer: {indent!r}") from e
        if allow := env.get("PRICE_CATALOG_ALLOW_EMPTY_SAVE"):
            kwargs["allow_empty_save"] = allow.strip().lower() in _TRUE_VALUES
        return cls(**kwargs)  # type: ignore[arg-type]


__all__ = ["EditorSettings", "configure_logging", "LOG_LEVEL_ENV"]
