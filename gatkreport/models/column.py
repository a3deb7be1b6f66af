from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..errors import ValidationError
from .data_type import DataType, classify

"""Column model: a named, typed slot shared by every row of a table."""

__all__ = [
    "Column",
    "NULL_TEXT",
    "is_valid_name",
]

VALID_NAME = re.compile(r"[A-Za-z0-9_.\-]+")
DEFAULT_FORMAT = "%s"
UNKNOWN_DECIMAL_FORMAT = "%.8f"
NULL_TEXT = "null"


def is_valid_name(name: str) -> bool:
    """Table and column names are purely alphanumeric plus ``_``, ``.`` and ``-``."""
    return isinstance(name, str) and VALID_NAME.fullmatch(name) is not None


@dataclass
class Column:
    """A named column with a display format and a tracked display width.

    The declared type is derived once from ``fmt`` and never changes. An empty
    format declares an UNKNOWN column displayed with ``%s``.
    """

    name: str
    fmt: str = ""
    data_type: DataType = field(init=False)
    max_width: int = field(init=False)

    def __post_init__(self) -> None:
        if not is_valid_name(self.name):
            raise ValidationError(
                f"Attempted to set a column name of '{self.name}'. Column names must be "
                "purely alphanumeric - no spaces or special characters are allowed."
            )
        self.data_type = DataType.from_format(self.fmt)
        if not self.fmt:
            self.fmt = DEFAULT_FORMAT
        self.max_width = len(self.name)

    def record_width(self, text: str) -> None:
        self.widen(len(text))

    def widen(self, width: int) -> None:
        """Display width never shrinks."""
        self.max_width = max(self.max_width, width)

    def format_value(self, value: Any) -> str:
        """Render a cell value for display."""
        if value is None:
            return NULL_TEXT
        if self.data_type is DataType.UNKNOWN and classify(value) is DataType.DECIMAL:
            return UNKNOWN_DECIMAL_FORMAT % value
        try:
            return self.fmt % (value,)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"format '{self.fmt}' of column '{self.name}' cannot render {value!r}: {e}") from e

    def same_format(self, other: Column) -> bool:
        return self.fmt == other.fmt and self.name == other.name
