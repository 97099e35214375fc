import warnings

import pytest

from oracompat.empty_strings import replace_empty_strings, replace_null_strings


def test_empty_strings_become_none():
    row = {"a": "", "b": "x", "c": 5}
    result = replace_empty_strings(row, ["a", "b"])
    assert result == {"a": None, "b": "x", "c": 5}
    assert row["a"] == ""


def test_non_string_columns_untouched():
    row = {"a": "", "b": ""}
    result = replace_empty_strings(row, ["a"])
    assert result["b"] == ""
    assert result["a"] is None


def test_null_strings_become_empty():
    row = {"a": None, "b": None, "c": "y"}
    result = replace_null_strings(row, ["a", "c"])
    assert result == {"a": "", "b": None, "c": "y"}


def test_round_trip_restores_original():
    row = {"a": "", "b": "text"}
    cols = ["a", "b"]
    assert replace_null_strings(replace_empty_strings(row, cols), cols) == row


def test_missing_columns_ignored():
    row = {"a": ""}
    assert replace_empty_strings(row, ["zzz"]) == row


def test_warning_message_for_empty():
    with pytest.warns(UserWarning) as record:
        replace_empty_strings({"name": ""}, ["name"], "people", True)
    assert str(record[0].message) == (
        'Field "name" of table "people" is empty string (replaced by NULL).')


def test_warning_message_for_null():
    with pytest.warns(UserWarning) as record:
        replace_null_strings({"name": None}, ["name"], "people", "on")
    assert str(record[0].message) == (
        "Field \"name\" of table \"people\" is NULL (replaced by '').")


def test_no_warning_unless_requested():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = replace_empty_strings({"a": ""}, ["a"], "t", "off")
    assert caught == []
    assert result == {"a": None}