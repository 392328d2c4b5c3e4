import importlib.metadata

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests run before the distribution is built) has no
# metadata; fall back to a neutral "0.0.0" placeholder.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("price-catalog")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

from price_catalog.editor import Outcome, PriceEditor, SaveOutcome  # noqa: E402
from price_catalog.models import PriceDocument, PriceEntry  # noqa: E402
from price_catalog.store import CatalogStore  # noqa: E402

__all__ = [
    "__version__",
    "CatalogStore",
    "Outcome",
    "PriceDocument",
    "PriceEditor",
    "PriceEntry",
    "SaveOutcome",
]
