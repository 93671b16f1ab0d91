"""Tests for increment form validation."""

import pytest

from counter_service.application.validation import IncrementForm, validate_increment
from counter_service.domain.value_objects.outcome import ValidationFailed


@pytest.mark.parametrize("raw, expected", [("1", 1), ("2", 2), ("3", 3), (3, 3)])
def test_accepts_one_to_three(raw, expected):
    result = validate_increment({"increment": raw})
    assert isinstance(result, IncrementForm)
    assert result.increment == expected


def test_ignores_unknown_fields():
    result = validate_increment({"increment": "2", "$ACTION_ID": "abc"})
    assert isinstance(result, IncrementForm)


def test_missing_field():
    result = validate_increment({})
    assert isinstance(result, ValidationFailed)
    assert result.issues[0]["type"] == "missing"
    assert result.errors["errors"] == []
    assert len(result.errors["properties"]["increment"]["errors"]) == 1


@pytest.mark.parametrize("raw, issue_type", [
    ("invalid", "int_parsing"),
    ("0", "greater_than_equal"),
    ("-1", "greater_than_equal"),
    ("4", "less_than_equal"),
])
def test_rejects_out_of_range_and_non_numeric(raw, issue_type):
    result = validate_increment({"increment": raw})
    assert isinstance(result, ValidationFailed)
    assert [i["type"] for i in result.issues] == [issue_type]
    assert result.issues[0]["field"] == "increment"


def test_rejects_fractional_value():
    result = validate_increment({"increment": "2.5"})
    assert isinstance(result, ValidationFailed)
    assert "increment" in result.errors["properties"]
