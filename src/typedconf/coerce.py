"""Parsers turning raw setting strings into typed values."""

from __future__ import annotations

import math
import re
import struct
from typing import Any, Callable

TRUE_TOKENS = ("true", "yes", "1")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?")
_SPECIAL_FLOATS = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


def parse_string(value: str) -> str:
    return value


def _parse_integer(value: str, low: int, high: int, kind: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"Not a base-10 {kind}: {value!r}")
    number = int(value, 10)
    if not low <= number <= high:
        raise ValueError(f"{kind} out of range: {value!r}")
    return number


def parse_int(value: str) -> int:
    """Parse a signed 32-bit integer."""
    return _parse_integer(value, INT_MIN, INT_MAX, "int")


def parse_long(value: str) -> int:
    """Parse a signed 64-bit integer."""
    return _parse_integer(value, LONG_MIN, LONG_MAX, "long")


def parse_double(value: str) -> float:
    """Parse a decimal; surrounding whitespace and an ``f``/``d`` suffix are allowed.

    Overflow yields an infinity rather than an error.
    """
    text = value.strip()
    special = _SPECIAL_FLOATS.get(text)
    if special is not None:
        return special
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"Not a decimal number: {value!r}")
    return float(text.rstrip("fFdD"))


def parse_float(value: str) -> float:
    """Parse a decimal rounded to single precision."""
    number = parse_double(value)
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def parse_boolean(value: str) -> bool:
    # Case-sensitive: "TRUE" is false.
    return value in TRUE_TOKENS


PARSERS: dict[str, Callable[[str], Any]] = {
    "string": parse_string,
    "int": parse_int,
    "long": parse_long,
    "float": parse_float,
    "double": parse_double,
    "boolean": parse_boolean,
}
