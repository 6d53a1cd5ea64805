"""Tests for numeric parameter conversion."""

import math

import pytest

from flagset.conversion import OUT_OF_RANGE, parse_float, parse_integer
from flagset.errors import ConversionError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("42", 42),
        ("+7", 7),
        ("-12", -12),
        ("0x1f", 31),
        ("0X1F", 31),
        ("-0x10", -16),
        ("0755", 493),
        ("0o17", 15),
        ("0b101", 5),
        ("0x_1f", 31),
        ("0o_17", 15),
        ("0_7", 7),
        ("1_000", 1000),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int32(text, expected):
    assert parse_integer(text, 32, signed=True) == expected


@pytest.mark.parametrize(
    "text",
    ["", "-", "abc", "12abc", "0x", "0x_", "08", " 1", "1 ", "--1", "0x0x1", "0x__1", "١٢"],
)
def test_parse_integer_invalid_syntax(text):
    with pytest.raises(ConversionError) as exc_info:
        parse_integer(text, 32, signed=True)
    assert "invalid syntax" in str(exc_info.value)
    assert exc_info.value.type_name == "int32"


def test_parse_int32_out_of_range():
    with pytest.raises(ConversionError) as exc_info:
        parse_integer("2147483648", 32, signed=True)
    assert exc_info.value.reason == OUT_OF_RANGE
    assert str(exc_info.value) == "parsing '2147483648' as int32: value out of range"


def test_parse_unsigned_rejects_sign():
    """Unsigned targets accept neither '-' nor '+'."""
    for text in ("-1", "+1"):
        with pytest.raises(ConversionError) as exc_info:
            parse_integer(text, 32, signed=False)
        assert exc_info.value.type_name == "uint32"


def test_parse_unsigned_limits():
    assert parse_integer("4294967295", 32, signed=False) == 4294967295
    assert parse_integer("18446744073709551615", 64, signed=False) == 2**64 - 1

    with pytest.raises(ConversionError):
        parse_integer("4294967296", 32, signed=False)
    with pytest.raises(ConversionError):
        parse_integer("18446744073709551616", 64, signed=False)


def test_parse_int64_limits():
    assert parse_integer("9223372036854775807", 64, signed=True) == 2**63 - 1
    assert parse_integer("-9223372036854775808", 64, signed=True) == -(2**63)

    with pytest.raises(ConversionError):
        parse_integer("9223372036854775808", 64, signed=True)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3", 3.0),
        ("-2.5", -2.5),
        ("1.5e3", 1500.0),
        ("0x1p-2", 0.25),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_parse_float_special_values():
    assert math.isinf(parse_float("inf"))
    assert parse_float("-Infinity") == -math.inf
    assert math.isnan(parse_float("nan"))


@pytest.mark.parametrize(
    "text", ["", "bad", " 1.0", "1.0 ", "1.2.3", "1_000.5", "0x1_0p0", "١.٥"]
)
def test_parse_float_invalid_syntax(text):
    with pytest.raises(ConversionError) as exc_info:
        parse_float(text)
    assert "invalid syntax" in str(exc_info.value)


def test_parse_float_out_of_range():
    with pytest.raises(ConversionError) as exc_info:
        parse_float("1e400")
    assert exc_info.value.reason == OUT_OF_RANGE


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        parse_float("nope")
