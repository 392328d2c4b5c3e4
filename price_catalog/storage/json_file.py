"""Single-file persistence for the price document."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from price_catalog.errors import TransportError
from price_catalog.settings import DEFAULT_FILENAME_PREFIX
from price_catalog.storage.transport import default_filename

logger = logging.getLogger(__name__)


class JsonFile:
    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser().resolve()

    @classmethod
    def for_directory(
        cls,
        directory: str | Path,
        today: date | None = None,
        prefix: str = DEFAULT_FILENAME_PREFIX,
    ) -> JsonFile:
        return cls(Path(directory) / default_filename(today, prefix))

    def read_text(self) -> str:
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise TransportError(f"Failed to read file {self.path.name}: {e}") from e
        logger.debug("Read %d characters from %s", len(text), self.path)
        return text

    def write_text(self, text: str) -> Path:
        # target holds either the old or the new text, never a partial write
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise TransportError(f"Failed to save file {self.path.name}: {e}") from e
        logger.info("Saved price catalog to %s", self.path)
        return self.path


__all__ = ["JsonFile"]
