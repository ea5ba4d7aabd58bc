import math

import pytest

from colframe.csvio.coerce import (
    coerce_field,
    parse_float_prefix,
    parse_float_strict,
    parse_int_prefix,
    parse_int_strict,
)
from colframe.dataframe import ColumnType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  42", 42),
        ("-7", -7),
        ("+7", 7),
        ("12abc", 12),
        ("3.9", 3),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("99999999999999999999", 2**63 - 1),
        ("-99999999999999999999", -(2**63)),
    ],
)
def test_parse_int_prefix(text, expected):
    assert parse_int_prefix(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.14", 3.14),
        (" 2.718", 2.718),
        ("-1.5", -1.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        ("2.5kg", 2.5),
        ("abc", 0.0),
        ("", 0.0),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_float_prefix(text, expected):
    assert parse_float_prefix(text) == expected


def test_parse_float_prefix_nan():
    assert math.isnan(parse_float_prefix("NaN"))


def test_parse_strict():
    assert parse_int_strict(" 42 ") == 42
    assert parse_float_strict("3.14") == 3.14
    with pytest.raises(ValueError):
        parse_int_strict("12abc")
    with pytest.raises(ValueError):
        parse_int_strict("3.5")
    with pytest.raises(ValueError):
        parse_int_strict(str(2**63))
    with pytest.raises(ValueError):
        parse_float_strict("abc")


@pytest.mark.parametrize("text", ["1_000", "١٢", "１２", "+", ""])
def test_parse_int_strict_rejects_non_ascii_digits(text):
    with pytest.raises(ValueError):
        parse_int_strict(text)


@pytest.mark.parametrize("text", ["1_0.5", "1_000", "١.5", "1e", "."])
def test_parse_float_strict_rejects_non_ascii_digits(text):
    with pytest.raises(ValueError):
        parse_float_strict(text)


@pytest.mark.parametrize(
    "text, expected",
    [("-12", -12), ("+7", 7), ("\t3\n", 3)],
)
def test_parse_int_strict_accepts(text, expected):
    assert parse_int_strict(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("1.", 1.0), (".5", 0.5), ("-2.5e3", -2500.0), (" inf ", math.inf)],
)
def test_parse_float_strict_accepts(text, expected):
    assert parse_float_strict(text) == expected


@pytest.mark.parametrize(
    "field, type, kwargs, expected",
    [
        ("12", ColumnType.INTEGER, {}, 12),
        ("oops", ColumnType.INTEGER, {}, 0),
        ("1.25", ColumnType.FLOAT, {}, 1.25),
        ("Alice", ColumnType.TEXT, {}, "Alice"),
        ("NULL", ColumnType.TEXT, {}, "NULL"),
        ("NULL", ColumnType.TEXT, {"null_text": "NULL"}, None),
        ("", ColumnType.TEXT, {"null_text": ""}, None),
    ],
)
def test_coerce_field(field, type, kwargs, expected):
    assert coerce_field(field, type, **kwargs) == expected


def test_coerce_field_strict():
    with pytest.raises(ValueError):
        coerce_field("oops", ColumnType.INTEGER, strict=True)
    with pytest.raises(ValueError):
        coerce_field("oops", ColumnType.FLOAT, strict=True)
    assert coerce_field("oops", ColumnType.TEXT, strict=True) == "oops"
