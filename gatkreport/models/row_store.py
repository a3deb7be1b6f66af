from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any

from ..errors import BoundsError, ConsistencyError

"""Row storage for report tables.

Rows live in an append-only arena addressed by a dense integer handle (the
positional row index). A separate mapping takes caller-chosen row ids to
handles. Several ids may share a handle, and handles are never reused.
"""

__all__ = [
    "RowStore",
]


class RowStore:
    """Append-only rows of fixed width plus a row id -> row index mapping."""

    def __init__(self, width: int = 0) -> None:
        self.width = width
        self._rows: list[list[Any]] = []
        self._ids: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._rows)

    @property
    def next_index(self) -> int:
        return len(self._rows)

    def add_column(self) -> None:
        """Widen every row by one empty cell."""
        self.width += 1
        for row in self._rows:
            row.append(None)

    def expand_to(self, index: int, map_identity: bool = False) -> None:
        """Grow the arena so that ``index`` exists, back-filling empty rows.

        With ``map_identity`` each new row is also reachable by its own index as id.
        """
        if index < 0:
            raise BoundsError(f"row index {index} is negative")
        while len(self._rows) <= index:
            handle = len(self._rows)
            if map_identity:
                self._ids[handle] = handle
            self._rows.append([None] * self.width)

    def append_rows(self, rows: Iterable[list[Any]]) -> int:
        """Append copies of ``rows``; returns the row count before appending.

        ``rows`` is copied up front, so a store may append its own rows.
        """
        incoming = [list(row) for row in rows]
        for row in incoming:
            if len(row) != self.width:
                raise BoundsError(f"row has {len(row)} cells, expected {self.width}")
        offset = len(self._rows)
        self._rows.extend(incoming)
        return offset

    def row(self, index: int) -> list[Any]:
        if index < 0 or index >= len(self._rows):
            raise BoundsError(f"row index {index} out of range (rows={len(self._rows)})")
        return self._rows[index]

    def cell(self, index: int, col: int) -> Any:
        return self.row(index)[self._check_col(col)]

    def set_cell(self, index: int, col: int, value: Any) -> None:
        self.row(index)[self._check_col(col)] = value

    def _check_col(self, col: int) -> int:
        if col < 0 or col >= self.width:
            raise BoundsError(f"column index {col} out of range (columns={self.width})")
        return col

    # row id mapping

    def map_id(self, row_id: Hashable, index: int) -> None:
        self._ids[row_id] = index

    def unmap_id(self, row_id: Hashable) -> None:
        self._ids.pop(row_id, None)

    def contains_id(self, row_id: Hashable) -> bool:
        return row_id in self._ids

    def index_of(self, row_id: Hashable) -> int:
        try:
            return self._ids[row_id]
        except KeyError:
            raise BoundsError(f"no row with id {row_id!r}") from None

    def ids(self) -> list[Hashable]:
        return list(self._ids)

    def id_items(self) -> list[tuple[Hashable, int]]:
        return list(self._ids.items())

    # ordering

    def validate_bijection(self) -> None:
        """Check that row ids map one-to-one onto ``[0, len(self))``."""
        if len(self._ids) != len(self._rows) or set(self._ids.values()) != set(range(len(self._rows))):
            raise ConsistencyError(
                "There isn't a 1-to-1 mapping from row ID to index; "
                "this can happen when rows are not created consistently"
            )

    def sorted_indices(self) -> list[int]:
        """Row indices ordered by row id. Requires a bijective id mapping."""
        self.validate_bijection()
        try:
            ordered = sorted(self._ids.items(), key=lambda item: item[0])
        except TypeError as e:
            raise ConsistencyError(
                "Unable to sort the rows based on the row IDs because the ID objects are of different types"
            ) from e
        return [index for _, index in ordered]

    def ordered_rows(self, sort_by_id: bool) -> list[list[Any]]:
        if not sort_by_id:
            return list(self._rows)
        return [self._rows[i] for i in self.sorted_indices()]
