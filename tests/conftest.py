"""Shared pytest fixtures for price catalog tests."""

import pytest

from price_catalog.confirmation import AutoConfirm
from price_catalog.editor import PriceEditor
from price_catalog.models import PriceDocument, PriceEntry
from price_catalog.store import CatalogStore


def make_valid_entry(**overrides):
    """Create a PriceEntry with a purchase price and optional overrides."""
    defaults = {"purchase_entry": 999, "wholesale_small": None, "market": None}
    return PriceEntry(**{**defaults, **overrides})


def make_document_data():
    return {
        "iPhone": {
            "iPhone 15": {
                "128GB": {"purchase_entry": 799, "wholesale_small": 849, "market": 899},
                "256GB": {"purchase_entry": 999, "wholesale_small": None, "market": None},
            },
            "iPhone 14": {},
        },
        "iPad": {},
    }


@pytest.fixture
def make_entry():
    """Fixture providing the make_valid_entry helper function."""
    return make_valid_entry


@pytest.fixture
def document_data():
    return make_document_data()


@pytest.fixture
def sample_document():
    return PriceDocument.model_validate(make_document_data())


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def loaded_store(sample_document):
    return CatalogStore(sample_document)


@pytest.fixture
def outcomes():
    return []


@pytest.fixture
def editor(loaded_store, outcomes):
    """Editor over the sample document that confirms every deletion."""
    return PriceEditor(store=loaded_store, confirm=AutoConfirm(True), notify=outcomes.append)


# Only the asyncio backend is installed; keep anyio from parameterizing on trio.
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"
