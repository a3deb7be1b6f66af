from __future__ import annotations

import logging
from typing import Any

from ..errors import BoundsError, StructureMismatchError, ValidationError
from .table import Table

"""Report model: a named collection of tables serialized as one stream.

Tables are kept keyed by name and always listed in name order, which is also
the order they are written in.
"""

__all__ = [
    "Report",
]

logger = logging.getLogger(__name__)


class Report:
    """A set of uniquely named tables."""

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def __repr__(self) -> str:
        return f"Report(tables={[t.name for t in self.tables]})"

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    @classmethod
    def simple(cls, table_name: str, *column_names: str) -> Report:
        """One-table report with untyped columns, filled with ``add_row``."""
        report = cls()
        table = report.add_table(table_name, "A simplified GATK table report", len(column_names), False)
        for column_name in column_names:
            table.add_column(column_name, "")
        return report

    @property
    def tables(self) -> list[Table]:
        return [self._tables[name] for name in sorted(self._tables)]

    def add_table(
        self,
        name: str,
        description: str = "",
        num_columns: int = 0,
        sort_by_row_id: bool = True,
        *,
        strict: bool = False,
    ) -> Table:
        table = Table(name, description, num_columns, sort_by_row_id, strict=strict)
        self.add(table)
        return table

    def add(self, table: Table) -> None:
        if table.name in self._tables:
            raise ValidationError(f"report already contains a table named '{table.name}'")
        self._tables[table.name] = table

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def get_table(self, name: str) -> Table:
        try:
            return self._tables[name]
        except KeyError:
            raise BoundsError(f"Table is not in report: {name}") from None

    def add_row(self, *values: Any) -> None:
        """Append a positional row to the single table of a simple report."""
        if len(self._tables) != 1:
            raise StructureMismatchError(
                f"add_row requires a report with exactly one table, found {len(self._tables)}"
            )
        table = next(iter(self._tables.values()))
        if len(values) != table.num_columns:
            raise BoundsError(
                f"Current row has {len(values)} values, table '{table.name}' has {table.num_columns} columns"
            )
        row_index = table.num_rows
        for col_index, value in enumerate(values):
            table.set_at(row_index, col_index, value)

    def is_same_format(self, other: Report) -> bool:
        if sorted(self._tables) != sorted(other._tables):
            return False
        return all(t.is_same_format(other._tables[name]) for name, t in self._tables.items())

    def concat(self, other: Report) -> None:
        """Concatenate each table of ``other`` onto the table with the same name."""
        if not self.is_same_format(other):
            raise StructureMismatchError("Error trying to combine reports with different formats")
        for name, table in self._tables.items():
            table.concat(other._tables[name])
        logger.debug(f"concat report tables={len(self._tables)}")

    def equals(self, other: Report) -> bool:
        if sorted(self._tables) != sorted(other._tables):
            return False
        return all(t.equals(other._tables[name]) for name, t in self._tables.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]
