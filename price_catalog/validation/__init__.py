"""Validation entrypoints (prices, names & whole documents)."""

from .document import check_document, document_issues, validate_document  # noqa: F401
from .issues import IssueCode, ValidationIssue, first_message, join_messages  # noqa: F401
from .names import (  # noqa: F401
    normalize_name,
    validate_category_name,
    validate_config_name,
    validate_model_name,
)
from .prices import (  # noqa: F401
    coerce_price_input,
    is_valid_price_entry,
    validate_price_value,
)
