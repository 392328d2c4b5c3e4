import math

import pytest

from price_catalog.models import PriceDocument
from price_catalog.validation import (
    IssueCode,
    coerce_price_input,
    document_issues,
    first_message,
    is_valid_price_entry,
    join_messages,
    normalize_name,
    validate_category_name,
    validate_config_name,
    validate_document,
    validate_model_name,
    validate_price_value,
)


def codes(issues):
    return [i.code for i in issues]


# Prices ---------------------------------------------------------------------
def test_price_value_boundaries():
    assert codes(validate_price_value(-1, False)) == [IssueCode.NEGATIVE]
    assert codes(validate_price_value(None, True)) == [IssueCode.MISSING_REQUIRED]
    assert validate_price_value(None, False) == []
    assert validate_price_value(5, True) == []
    assert validate_price_value(0, True) == []


@pytest.mark.parametrize(
    "value,expected",
    [
        ("abc", IssueCode.NOT_A_NUMBER),
        (True, IssueCode.NOT_A_NUMBER),
        (math.inf, IssueCode.NOT_FINITE),
        (math.nan, IssueCode.NOT_FINITE),
        (-math.inf, IssueCode.NEGATIVE),
        (-0.01, IssueCode.NEGATIVE),
        (10**400, IssueCode.NOT_FINITE),
    ],
)
def test_price_value_failures(value, expected):
    assert codes(validate_price_value(value, required=True)) == [expected]


def test_price_issue_carries_field_name():
    issues = validate_price_value(-3, field="market")
    assert issues[0].field == "market"
    assert first_message(issues) == "Price cannot be negative"


@pytest.mark.parametrize(
    "raw,expected",
    [("", None), ("   ", None), ("12.5", 12.5), (" 7 ", 7.0), (3, 3), (None, None)],
)
def test_coerce_price_input(raw, expected):
    assert coerce_price_input(raw) == expected


def test_coerce_price_input_keeps_garbage_for_validation():
    raw = "twelve"
    assert coerce_price_input(raw) is raw
    assert codes(validate_price_value(coerce_price_input(raw))) == [IssueCode.NOT_A_NUMBER]


def test_is_valid_price_entry():
    assert is_valid_price_entry({"purchase_entry": 0, "wholesale_small": None, "market": None})
    assert is_valid_price_entry({"purchase_entry": 1.5, "market": 2})
    assert not is_valid_price_entry({"purchase_entry": -5})
    assert not is_valid_price_entry({"wholesale_small": 1})
    assert not is_valid_price_entry([1, 2, 3])
    assert not is_valid_price_entry(None)


# Names ------------------------------------------------------------------------
def test_normalize_name():
    assert normalize_name("  iPhone ") == "iPhone"
    assert normalize_name(None) == ""


def test_category_name_rules():
    assert codes(validate_category_name("   ", [])) == [IssueCode.EMPTY]
    assert codes(validate_category_name("", ["A"])) == [IssueCode.EMPTY]
    assert codes(validate_category_name(" A ", ["A"])) == [IssueCode.DUPLICATE]
    assert validate_category_name("a", ["A"]) == []
    assert validate_category_name("B", ["A"]) == []


def test_names_collide_with_untrimmed_existing_keys():
    assert codes(validate_category_name("A", [" A"])) == [IssueCode.DUPLICATE]
    assert codes(validate_category_name(" A", ["A  "])) == [IssueCode.DUPLICATE]
    document = PriceDocument.model_validate({"Mac": {" Air": {"8GB ": {"purchase_entry": 1}}}})
    assert codes(validate_model_name("Air", "Mac", document)) == [IssueCode.DUPLICATE]
    assert codes(validate_config_name("8GB", "Mac", " Air", document)) == [IssueCode.DUPLICATE]


def test_model_name_scoped_to_category(sample_document):
    assert codes(validate_model_name("iPhone 15", "iPhone", sample_document)) == [
        IssueCode.DUPLICATE
    ]
    assert validate_model_name("iPhone 15", "iPad", sample_document) == []
    assert validate_model_name("iPhone 15", "missing", sample_document) == []
    assert codes(validate_model_name(" ", "iPhone", sample_document)) == [IssueCode.EMPTY]


def test_config_name_scoped_to_model(sample_document):
    issues = validate_config_name(" 256GB", "iPhone", "iPhone 15", sample_document)
    assert codes(issues) == [IssueCode.DUPLICATE]
    assert "already exists in this model" in issues[0].message
    assert validate_config_name("256GB", "iPhone", "iPhone 14", sample_document) == []
    assert validate_config_name("512GB", "iPhone", "iPhone 15", sample_document) == []


def test_join_messages():
    issues = validate_price_value("x") + validate_category_name("", [])
    assert join_messages(issues) == "Value must be a number. Category name cannot be empty"
    assert join_messages([]) == ""


# Documents ----------------------------------------------------------------------
def test_validate_document_accepts_valid_and_empty(document_data):
    assert validate_document(document_data)
    assert validate_document({})
    assert validate_document({"A": {}})
    assert validate_document({"A": {"B": {}}})


@pytest.mark.parametrize(
    "candidate",
    [
        None,
        [],
        "text",
        {"A": []},
        {"A": {"B": 5}},
        {"A": {"B": {"C": "price"}}},
        {"A": {"B": {"C": {"purchase_entry": -5}}}},
        {"A": {"B": {"C": {"purchase_entry": 1, "market": -1}}}},
        {" ": {}},
    ],
)
def test_validate_document_rejects(candidate):
    assert not validate_document(candidate)
    assert document_issues(candidate)


def test_document_issues_point_at_offending_path():
    issues = document_issues({"A": {"B": {"C": {"purchase_entry": -5}}}})
    assert any("A.B.C.purchase_entry" in issue for issue in issues)
