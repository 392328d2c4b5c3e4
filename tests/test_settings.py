import logging

import pytest

from price_catalog.errors import NotFoundError, ValidationError
from price_catalog.settings import EditorSettings, configure_logging
from price_catalog.validation import validate_price_value


def test_settings_defaults():
    settings = EditorSettings()
    assert settings.filename_prefix == "price-config"
    assert settings.indent == 2
    assert settings.ensure_ascii is False
    assert settings.allow_empty_save is False


def test_settings_from_env():
    settings = EditorSettings.from_env(
        {
            "PRICE_CATALOG_FILENAME_PREFIX": "prices",
            "PRICE_CATALOG_INDENT": "4",
            "PRICE_CATALOG_ALLOW_EMPTY_SAVE": "Yes",
        }
    )
    assert settings == EditorSettings(filename_prefix="prices", indent=4, allow_empty_save=True)
    assert EditorSettings.from_env({}) == EditorSettings()


@pytest.mark.parametrize(
    "env",
    [{"PRICE_CATALOG_INDENT": "two"}, {"PRICE_CATALOG_INDENT": "-1"}],
)
def test_settings_from_env_rejects_bad_values(env):
    with pytest.raises(ValueError):
        EditorSettings.from_env(env)


def test_configure_logging_is_idempotent():
    configure_logging()
    handlers = list(logging.getLogger().handlers)
    configure_logging()
    assert logging.getLogger().handlers == handlers


def test_validation_error_wraps_first_issue():
    issues = validate_price_value(-1, field="market")
    err = ValidationError(issues)
    assert err.message == "Price cannot be negative"
    assert err.field == "market"
    assert err.error_type == "ValidationError"
    with pytest.raises(ValueError):
        ValidationError([])


def test_not_found_error_type():
    assert NotFoundError("gone").error_type == "NotFoundError"
