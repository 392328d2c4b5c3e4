"""Store commands and the pure reducer that applies them."""

from .commands import (  # noqa: F401
    AddCategory,
    AddConfig,
    AddModel,
    Command,
    DeleteCategory,
    DeleteConfig,
    DeleteModel,
    SetDocument,
    UpdatePrice,
    parse_command,
)
from .reducer import reduce  # noqa: F401
