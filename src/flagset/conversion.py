"""Numeric conversion of option parameters."""

import math

from flagset.errors import ConversionError

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"

_PREFIX_RADIX = {"0x": 16, "0o": 8, "0b": 2}


def _split_radix(digits: str) -> tuple[str, int]:
    """Strip a base prefix from an unsigned literal and return its radix.

    ``0x``, ``0o`` and ``0b`` (any case) select hexadecimal, octal and binary;
    a leading ``0`` followed by more digits is octal; anything else is decimal.
    """
    prefix = digits[:2].lower()
    if prefix in _PREFIX_RADIX:
        return digits[2:], _PREFIX_RADIX[prefix]
    if len(digits) > 1 and digits[0] == "0":
        return digits[1:], 8
    return digits, 10


def parse_integer(value: str, bits: int, signed: bool) -> int:
    """Parse ``value`` as an integer of the given width and signedness.

    Args:
        value: Parameter text, e.g. ``"42"``, ``"-0x1f"``, ``"0755"``
        bits: Width of the target type (32 or 64)
        signed: Whether a leading ``+``/``-`` and negative values are allowed

    Returns:
        The converted integer

    Raises:
        ConversionError: If the text is not an integer literal or does not fit
    """
    type_name = f"{'int' if signed else 'uint'}{bits}"
    # int() also accepts non-ASCII digits such as "١٢"
    if not value.isascii():
        raise ConversionError(value, type_name, INVALID_SYNTAX)

    digits = value
    negative = False
    if signed and digits[:1] in ("+", "-"):
        negative = digits[0] == "-"
        digits = digits[1:]

    body, radix = _split_radix(digits)
    # One underscore may separate a base prefix from the digits: 0x_1f
    if radix != 10 and body.startswith("_"):
        body = body[1:]
    # int() tolerates whitespace and signs that are not part of the syntax here
    if (
        not body
        or body != body.strip()
        or body[0] in "+-"
        or body[:2].lower() in _PREFIX_RADIX
    ):
        raise ConversionError(value, type_name, INVALID_SYNTAX)
    try:
        number = int(body, radix)
    except ValueError:
        raise ConversionError(value, type_name, INVALID_SYNTAX) from None

    if negative:
        number = -number
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= number <= high:
        raise ConversionError(value, type_name, OUT_OF_RANGE)
    return number


def parse_float(value: str) -> float:
    """Parse ``value`` as a 64-bit float.

    Accepts decimal and exponent forms, hexadecimal floats (``0x1p-2``),
    ``inf``/``infinity`` and ``nan``. Finite literals too large for a double
    are rejected instead of silently becoming infinite.

    Raises:
        ConversionError: If the text is not a float literal or overflows
    """
    # float() also accepts digit underscores and non-ASCII digits
    if not value or value != value.strip() or not value.isascii() or "_" in value:
        raise ConversionError(value, "float64", INVALID_SYNTAX)

    unsigned = value[1:] if value[0] in "+-" else value
    try:
        if unsigned[:2].lower() == "0x":
            number = float.fromhex(value)
        else:
            number = float(value)
    except OverflowError:
        raise ConversionError(value, "float64", OUT_OF_RANGE) from None
    except ValueError:
        raise ConversionError(value, "float64", INVALID_SYNTAX) from None

    if math.isinf(number) and "inf" not in unsigned.lower():
        raise ConversionError(value, "float64", OUT_OF_RANGE)
    return number
