from __future__ import annotations

import re
from enum import Enum
from typing import Any

import numpy as np

from ..errors import CoercionError, ValidationError

"""Value categories stored in report table cells.

A cell value classifies into one of four concrete categories. UNKNOWN is only
ever a column state: the column has no type constraint and accepts anything.

Text coming from a serialized table (or from callers handing over raw strings)
is coerced toward a column's declared type with ``try_parse``.
"""

__all__ = [
    "Char",
    "DataType",
    "classify",
    "try_parse",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class Char(str):
    """A single character value.

    Plain ``str`` always classifies as STRING; wrapping a one-character string in
    ``Char`` makes it a CHARACTER value.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Char:
        if not isinstance(value, str) or len(value) != 1:
            raise ValidationError(f"Char requires exactly one character, got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Char({str.__repr__(self)})"


class DataType(Enum):
    """Closed set of cell value categories.

    ``format_pattern`` is the regular expression a column format specifier must
    fully match to declare that type.
    """

    INTEGER = ("Integer", r"%[-+ 0#]*[0-9]*[di]")
    DECIMAL = ("Decimal", r"%[-+ 0#]*[0-9]*(\.[0-9]+)?[eEfFgG]")
    CHARACTER = ("Character", r"%-?[0-9]*c")
    STRING = ("String", r"%-?[0-9]*s")
    UNKNOWN = ("Unknown", None)

    def __init__(self, label: str, format_pattern: str | None) -> None:
        self.label = label
        self.format_pattern = re.compile(format_pattern) if format_pattern else None

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_format(cls, fmt: str) -> DataType:
        """Derive the declared type from a print-style format specifier.

        An empty specifier, or one no concrete type recognizes, yields UNKNOWN.
        """
        if not fmt:
            return cls.UNKNOWN
        for member in cls:
            if member.format_pattern is not None and member.format_pattern.fullmatch(fmt):
                return member
        return cls.UNKNOWN


def classify(value: Any) -> DataType:
    """Return the category of a stored value. Never returns UNKNOWN."""
    if isinstance(value, (bool, np.bool_)):
        return DataType.STRING
    if isinstance(value, Char):
        return DataType.CHARACTER
    if isinstance(value, (int, np.integer)):
        if INT64_MIN <= int(value) <= INT64_MAX:
            return DataType.INTEGER
        return DataType.STRING
    if isinstance(value, (float, np.floating)):
        return DataType.DECIMAL
    return DataType.STRING


def _parse_integer(text: str) -> int | None:
    if not _INTEGER_TEXT.fullmatch(text):
        return None
    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def _parse_decimal(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def try_parse(text: Any, target: DataType, strict: bool = False) -> Any:
    """Coerce text toward ``target``.

    Non-text input, STRING and UNKNOWN targets are returned unchanged. When the
    text does not parse, the original text comes back (lenient) or
    CoercionError is raised (strict).
    """
    if not isinstance(text, str) or isinstance(text, Char):
        return text
    if target in (DataType.STRING, DataType.UNKNOWN):
        return text

    parsed: Any = None
    if target is DataType.INTEGER:
        parsed = _parse_integer(text)
    elif target is DataType.DECIMAL:
        parsed = _parse_decimal(text)
    elif target is DataType.CHARACTER and len(text) == 1:
        parsed = Char(text)

    if parsed is not None:
        return parsed
    if strict:
        raise CoercionError(f"cannot parse {text!r} as {target.label}")
    return text
