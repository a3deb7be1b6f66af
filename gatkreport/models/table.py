from __future__ import annotations

import logging
import re
from collections.abc import Hashable, Iterator
from typing import Any

from ..errors import BoundsError, ConsistencyError, StructureMismatchError, TypeMismatchError, ValidationError
from .column import NULL_TEXT, Column, is_valid_name
from .data_type import DataType, classify, try_parse
from .row_store import RowStore

"""Report table: the composition root of columns and rows.

A table is built incrementally (columns added, cells set by row id or by
position) or reconstructed by the codec. Tables with the same format produced
by independent workers are folded together with ``concat``.

Example:
    >>> t = Table("T", "desc", 2)
    >>> t.add_column("id", "%s")
    >>> t.add_column("count", "%d")
    >>> t.set(0, "id", "a")
    >>> t.set(0, "count", 5)
    >>> t.find_row_by_data("a", 5)
    0
"""

__all__ = [
    "NOT_FOUND",
    "Table",
    "cell_text",
]

logger = logging.getLogger(__name__)

NOT_FOUND = -1

_LINE_BREAK = re.compile(r"[\r\n]")


def cell_text(value: Any) -> str:
    """Textual rendering used to compare cells across tables."""
    return NULL_TEXT if value is None else str(value)


def _same_cell(expected: Any, stored: Any) -> bool:
    if expected is None or stored is None:
        return expected is stored
    return classify(expected) is classify(stored) and expected == stored


class Table:
    """In-memory report table with typed columns and row-id addressing.

    Parameters:
        name: table name, alphanumeric plus ``_``, ``.`` and ``-``
        description: free text without line breaks
        num_columns: advisory number of columns the caller intends to add
        sort_by_row_id: write rows ordered by row id instead of insertion order
        strict: raise CoercionError instead of keeping unparseable text
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        num_columns: int = 0,
        sort_by_row_id: bool = True,
        *,
        strict: bool = False,
    ) -> None:
        if not is_valid_name(name):
            raise ValidationError(
                f"Attempted to set a table name of '{name}'. Table names must be purely "
                "alphanumeric - no spaces or special characters are allowed."
            )
        if not isinstance(description, str) or _LINE_BREAK.search(description):
            raise ValidationError(
                f"Attempted to set a table description of {description!r}. "
                "Table descriptions must not contain newlines."
            )
        if num_columns < 0:
            raise ValidationError(f"num_columns must be non-negative, got {num_columns}")

        self._name = name
        self._description = description
        self._sort_by_row_id = sort_by_row_id
        self.num_columns_hint = num_columns
        self.strict = strict
        self._columns: list[Column] = []
        self._column_index: dict[str, int] = {}
        self._store = RowStore()

    def __repr__(self) -> str:
        return (
            f"Table(name={self._name!r}, columns={self.num_columns}, rows={self.num_rows}, "
            f"sort_by_row_id={self._sort_by_row_id})"
        )

    # metadata

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def sort_by_row_id(self) -> bool:
        return self._sort_by_row_id

    @property
    def columns(self) -> list[Column]:
        return list(self._columns)

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    @property
    def num_rows(self) -> int:
        return len(self._store)

    def column(self, name: str) -> Column:
        return self._columns[self._resolve_column(name)]

    def column_names(self) -> list[str]:
        return [c.name for c in self._columns]

    # structure

    def add_column(self, name: str, fmt: str = "") -> None:
        """Append a column. Duplicate names are rejected."""
        if name in self._column_index:
            raise ValidationError(f"column '{name}' already exists in table '{self._name}'")
        column = Column(name, fmt)
        self._column_index[name] = len(self._columns)
        self._columns.append(column)
        self._store.add_column()

    def add_row_id(self, row_id: Hashable, populate_first_column: bool = False) -> None:
        """Map ``row_id`` to a new row appended at the end of the table."""
        self.add_row_id_mapping(row_id, self._store.next_index, populate_first_column)

    def add_row_id_mapping(self, row_id: Hashable, index: int, populate_first_column: bool = False) -> None:
        if index < 0:
            raise BoundsError(f"row index {index} is negative")
        checked = self._checked_cell(0, row_id) if populate_first_column else None
        self._store.expand_to(index)
        self._store.map_id(row_id, index)
        if checked is not None:
            self._store_cell(index, 0, *checked)

    def remove_row_id_mapping(self, row_id: Hashable) -> None:
        """Forget the id only; the row itself stays in place."""
        self._store.unmap_id(row_id)

    def contains_row_id(self, row_id: Hashable) -> bool:
        return self._store.contains_id(row_id)

    def row_ids(self) -> list[Hashable]:
        return self._store.ids()

    def row_index(self, row_id: Hashable) -> int:
        return self._store.index_of(row_id)

    # cell access

    def _resolve_column(self, name: str) -> int:
        try:
            return self._column_index[name]
        except KeyError:
            raise BoundsError(f"no column named '{name}' in table '{self._name}'") from None

    def _row_for_id(self, row_id: Hashable) -> int:
        """Index of ``row_id``, registering an unseen id at the next row."""
        if not self._store.contains_id(row_id):
            index = self._store.next_index
            self._store.expand_to(index)
            self._store.map_id(row_id, index)
        return self._store.index_of(row_id)

    def _checked_cell(self, col_index: int, value: Any) -> tuple[Any, str]:
        """Coerce and type-check ``value`` for a column without touching the table.

        Returns the value to store and its display text.
        """
        if col_index < 0 or col_index >= self.num_columns:
            raise BoundsError(f"attempted to access a cell that does not exist in table '{self._name}'")
        column = self._columns[col_index]

        if value is None:
            value = NULL_TEXT
        else:
            value = try_parse(value, column.data_type, self.strict)

        actual = classify(value)
        if column.data_type is not DataType.UNKNOWN and actual is not column.data_type:
            raise TypeMismatchError(
                f"Tried to add an object of type: {actual} to a column of type: {column.data_type}"
            )
        return value, column.format_value(value)

    def _store_cell(self, row_index: int, col_index: int, value: Any, text: str) -> None:
        self._store.set_cell(row_index, col_index, value)
        self._columns[col_index].record_width(text)

    def set(self, row_id: Hashable, column_name: str, value: Any) -> None:
        """Set a cell by row id, registering unseen ids at the next row."""
        col = self._resolve_column(column_name)
        checked = self._checked_cell(col, value)
        self._store_cell(self._row_for_id(row_id), col, *checked)

    def set_at(self, row_index: int, col_index: int, value: Any) -> None:
        """Set a cell by position, growing the table to include ``row_index``."""
        if row_index < 0:
            raise BoundsError(f"attempted to access a cell that does not exist in table '{self._name}'")
        checked = self._checked_cell(col_index, value)
        self._store.expand_to(row_index, map_identity=True)
        self._store_cell(row_index, col_index, *checked)

    def get(self, row_id: Hashable, column_name: str) -> Any:
        return self.get_at(self._store.index_of(row_id), self._resolve_column(column_name))

    def get_at(self, row_index: int, col_index: int) -> Any:
        if row_index < 0 or col_index < 0 or col_index >= self.num_columns or row_index >= self.num_rows:
            raise BoundsError(f"attempted to access a cell that does not exist in table '{self._name}'")
        return self._store.cell(row_index, col_index)

    def increment(self, row_id: Hashable, column_name: str) -> None:
        """Add one to an integer cell; a missing or empty cell counts as 0."""
        col = self._resolve_column(column_name)
        previous = 0
        if self._store.contains_id(row_id):
            current = self._store.cell(self._store.index_of(row_id), col)
            if current is not None:
                if classify(current) is not DataType.INTEGER:
                    raise TypeMismatchError("Attempting to increment a value in a cell that is not an integer")
                previous = int(current)
        checked = self._checked_cell(col, previous + 1)
        self._store_cell(self._row_for_id(row_id), col, *checked)

    def find_row_by_data(self, *values: Any) -> int:
        """Index of the first row whose leading cells equal ``values``, else NOT_FOUND."""
        if not values or len(values) > self.num_columns:
            return NOT_FOUND
        for index, row in enumerate(self._store):
            if all(_same_cell(v, c) for v, c in zip(values, row)):
                return index
        return NOT_FOUND

    # iteration

    def rows(self) -> Iterator[list[Any]]:
        """Rows in storage order."""
        for row in self._store:
            yield list(row)

    def ordered_rows(self) -> list[list[Any]]:
        """Rows in write order: by row id when sorting is on, else storage order.

        Raises ConsistencyError if sorting is on and the ids cannot order the rows.
        """
        return self._store.ordered_rows(self._sort_by_row_id)

    def _comparison_rows(self) -> list[list[Any]]:
        try:
            return self.ordered_rows()
        except ConsistencyError:
            return self._store.ordered_rows(False)

    # merge and comparison

    def is_same_format(self, other: Table) -> bool:
        """Same name, description and per-column (format, name); data is ignored."""
        if (
            self._name != other._name
            or self._description != other._description
            or self.num_columns != other.num_columns
        ):
            return False
        return all(mine.same_format(theirs) for mine, theirs in zip(self._columns, other._columns))

    def concat(self, other: Table) -> None:
        """Append the rows and row ids of a same-format table."""
        if not self.is_same_format(other):
            raise StructureMismatchError("Error trying to concatenate tables with different formats")
        offset = self._store.append_rows(other._store)
        for row_id, index in other._store.id_items():
            self._store.map_id(row_id, index + offset)
        for mine, theirs in zip(self._columns, other._columns):
            mine.widen(theirs.max_width)
        logger.debug(f"concat table={self._name} appended={other.num_rows} rows={self.num_rows}")

    def equals(self, other: Table) -> bool:
        """Same format, same row count and same cell text row by row."""
        if not self.is_same_format(other) or self.num_rows != other.num_rows:
            return False
        for mine, theirs in zip(self._comparison_rows(), other._comparison_rows()):
            if [cell_text(c) for c in mine] != [cell_text(c) for c in theirs]:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]
