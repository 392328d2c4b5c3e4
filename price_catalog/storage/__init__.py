"""Document text transport and single-file persistence."""

from .json_file import JsonFile  # noqa: F401
from .transport import (  # noqa: F401
    ParseResult,
    default_filename,
    load_document,
    parse,
    serialize,
)
