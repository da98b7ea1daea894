"""Fixed-column field conversion for column-oriented text records."""

from __future__ import annotations

import re
from typing import Any

_WHITESPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class BadConversion(ValueError):
    """A field could not be converted, or its columns are out of range."""


class _Unsigned:
    def __repr__(self) -> str:
        return "UNSIGNED"


UNSIGNED = _Unsigned()
"""Kind for non-negative integer fields."""


def _check_range(text: str, i: int, j: int) -> None:
    if i < 1 or i > j + 1 or j > len(text):
        raise BadConversion(f"columns {i}-{j} out of range")


def _parse_int(field: str) -> int:
    if not _INT_RE.fullmatch(field):
        raise BadConversion(f"not an integer: {field!r}")
    value = int(field)
    if not _INT_MIN <= value <= _INT_MAX:
        raise BadConversion(f"integer out of range: {field!r}")
    return value


def convert_substring(text: str, i: int, j: int, kind: Any = float):
    """Convert columns i..j (1-based, inclusive) of text.

    Leading whitespace is skipped; anything else that does not belong to the
    value, trailing whitespace included, raises BadConversion. ``kind`` is
    int, float, str or UNSIGNED.
    """
    _check_range(text, i, j)
    while i <= j and text[i - 1] in _WHITESPACE:
        i += 1
    field = text[i - 1 : j]
    if kind is str:
        return field
    if kind is int:
        return _parse_int(field)
    if kind is UNSIGNED:
        value = _parse_int(field)
        if value < 0:
            raise BadConversion(f"negative value: {field!r}")
        return value
    if kind is float:
        if not _FLOAT_RE.fullmatch(field):
            raise BadConversion(f"not a number: {field!r}")
        return float(field)
    raise TypeError(f"unsupported kind {kind!r}")


def substring_is_blank(text: str, i: int, j: int) -> bool:
    """Whether columns i..j (1-based, inclusive) hold only whitespace."""
    _check_range(text, i, j)
    return all(ch in _WHITESPACE for ch in text[i - 1 : j])