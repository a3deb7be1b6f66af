from __future__ import annotations

import io
import logging
from typing import TextIO

from ..models.column import NULL_TEXT, Column
from ..models.report import Report
from ..models.table import Table
from .layout import COLUMN_GAP, END_MARKER, SEPARATOR, TABLE_HEADER_PREFIX
from .version import CURRENT_VERSION

"""Table and report serialization.

Output is deterministic: every cell is left-justified to its column's tracked
display width and columns are separated by two spaces. Rows come out in the
table's ordered sequence, so a table sorted by row id needs a bijective id
mapping; that is checked before the first byte is written.
"""

__all__ = [
    "write_table",
    "write_report",
    "dumps_table",
    "dumps_report",
]

logger = logging.getLogger(__name__)


def _justify(cells: list[str], columns: list[Column]) -> str:
    return COLUMN_GAP.join(f"{text:<{column.max_width}}" for text, column in zip(cells, columns))


def write_table(table: Table, out: TextIO) -> None:
    """Write ``table`` followed by its trailing blank line."""
    columns = table.columns
    rows = table.ordered_rows()

    # cells never written render as null and must fit their column
    for row in rows:
        for column, value in zip(columns, row):
            if value is None:
                column.record_width(NULL_TEXT)

    out.write(f"{TABLE_HEADER_PREFIX}{SEPARATOR}{table.num_columns}{SEPARATOR}{table.num_rows}")
    for column in columns:
        out.write(SEPARATOR + column.fmt)
    out.write(END_MARKER + "\n")
    out.write(f"{TABLE_HEADER_PREFIX}{SEPARATOR}{table.name}{SEPARATOR}{table.description}\n")

    out.write(_justify([c.name for c in columns], columns) + "\n")
    for row in rows:
        out.write(_justify([c.format_value(v) for c, v in zip(columns, row)], columns) + "\n")
    out.write("\n")
    logger.debug(f"wrote table={table.name} columns={table.num_columns} rows={table.num_rows}")


def write_report(report: Report, out: TextIO) -> None:
    """Write the version header and every table, ordered by table name."""
    tables = report.tables
    out.write(f"{CURRENT_VERSION.header}{SEPARATOR}{len(tables)}\n")
    for table in tables:
        write_table(table, out)


def dumps_table(table: Table) -> str:
    buf = io.StringIO()
    write_table(table, buf)
    return buf.getvalue()


def dumps_report(report: Report) -> str:
    buf = io.StringIO()
    write_report(report, buf)
    return buf.getvalue()
