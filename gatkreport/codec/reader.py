from __future__ import annotations

import io
import logging
from typing import TextIO

from ..errors import CoercionError, FormatError, TypeMismatchError, ValidationError
from ..models.column import NULL_TEXT
from ..models.data_type import DataType
from ..models.report import Report
from ..models.table import Table
from .fixed_width import split_fixed_width, word_starts
from .layout import END_MARKER, SEPARATOR, TABLE_HEADER_PREFIX, TableDataField, TableNameField
from .version import CURRENT_VERSION, ReportVersion

"""Table and report deserialization.

Reading is version gated: the version is checked before any line is consumed.
Tables read back are never re-sorted (``sort_by_row_id`` is off) and their row
ids are the identity mapping 0 -> 0, 1 -> 1, ...
"""

__all__ = [
    "read_table",
    "read_report",
    "loads_table",
    "loads_report",
]

logger = logging.getLogger(__name__)

COULD_NOT_READ_HEADER = "Could not read the header of this file -- "
COULD_NOT_READ_COLUMN_NAMES = "Could not read the column names of this file -- "
COULD_NOT_READ_DATA_LINE = "Could not read a data line of this table -- "
COULD_NOT_READ_EMPTY_LINE = "Could not read the last empty line of this table -- "

PHASE_HEADER = "header"
PHASE_COLUMN_NAMES = "column names"
PHASE_DATA_LINE = "data line"
PHASE_TRAILING_LINE = "trailing blank line"

_MESSAGES = {
    PHASE_HEADER: COULD_NOT_READ_HEADER,
    PHASE_COLUMN_NAMES: COULD_NOT_READ_COLUMN_NAMES,
    PHASE_DATA_LINE: COULD_NOT_READ_DATA_LINE,
    PHASE_TRAILING_LINE: COULD_NOT_READ_EMPTY_LINE,
}

# typed columns keep written nulls as empty cells
_TEXT_TYPES = (DataType.STRING, DataType.UNKNOWN)


class _LineSource:
    """Counts lines so errors can point at the offending one."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.line_number = 0

    def fail(self, phase: str, detail: str) -> FormatError:
        return FormatError(f"{_MESSAGES[phase]}{detail}", phase=phase, line=self.line_number)

    def read(self, phase: str, allow_eof: bool = False) -> str | None:
        try:
            line = self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise self.fail(phase, str(e)) from e
        if line == "":
            if allow_eof:
                return None
            raise self.fail(phase, "unexpected end of stream")
        self.line_number += 1
        return line.rstrip("\r\n")


def _parse_count(source: _LineSource, fields: list[str], index: int, what: str) -> int:
    try:
        count = int(fields[index])
    except (IndexError, ValueError):
        raise source.fail(PHASE_HEADER, f"missing or invalid {what}") from None
    if count < 0:
        raise source.fail(PHASE_HEADER, f"negative {what}: {count}")
    return count


def _read_table(source: _LineSource, version: ReportVersion, strict: bool) -> Table:
    version.require_readable()

    header = source.read(PHASE_HEADER)
    if header.endswith(END_MARKER):
        header = header[: -len(END_MARKER)]
    table_data = header.split(SEPARATOR)
    if SEPARATOR.join(table_data[:2]) != TABLE_HEADER_PREFIX:
        raise source.fail(PHASE_HEADER, f"expected a line starting with {TABLE_HEADER_PREFIX}")
    n_columns = _parse_count(source, table_data, TableDataField.COLS, "column count")
    n_rows = _parse_count(source, table_data, TableDataField.ROWS, "row count")
    formats = table_data[TableDataField.FORMAT_START : TableDataField.FORMAT_START + n_columns]
    if len(formats) != n_columns:
        raise source.fail(PHASE_HEADER, f"expected {n_columns} column formats, found {len(formats)}")

    name_data = source.read(PHASE_HEADER).split(SEPARATOR, TableNameField.DESCRIPTION)
    if SEPARATOR.join(name_data[:2]) != TABLE_HEADER_PREFIX or len(name_data) <= TableNameField.NAME:
        raise source.fail(PHASE_HEADER, "missing table name")
    name = name_data[TableNameField.NAME]
    description = name_data[TableNameField.DESCRIPTION] if len(name_data) > TableNameField.DESCRIPTION else ""

    try:
        table = Table(name, description, n_columns, sort_by_row_id=False, strict=strict)
    except ValidationError as e:
        raise source.fail(PHASE_HEADER, str(e)) from e

    column_line = source.read(PHASE_COLUMN_NAMES)
    starts = word_starts(column_line)
    names = split_fixed_width(column_line, starts) if n_columns else []
    if len(names) != n_columns:
        raise source.fail(PHASE_COLUMN_NAMES, f"expected {n_columns} column names, found {len(names)}")
    try:
        for column_name, fmt in zip(names, formats):
            table.add_column(column_name, fmt)
    except ValidationError as e:
        raise source.fail(PHASE_COLUMN_NAMES, str(e)) from e

    for i in range(n_rows):
        table.add_row_id_mapping(i, i)

    columns = table.columns
    for i in range(n_rows):
        data_line = source.read(PHASE_DATA_LINE)
        cells = split_fixed_width(data_line, starts)
        for col_index, column in enumerate(columns):
            text = cells[col_index] if col_index < len(cells) else ""
            if text == NULL_TEXT and column.data_type not in _TEXT_TYPES:
                continue
            try:
                table.set_at(i, col_index, text)
            except (TypeMismatchError, CoercionError, ValidationError) as e:
                raise source.fail(PHASE_DATA_LINE, f"column '{column.name}': {e}") from e

    # the separator line is consumed unread; end of stream stands in for it
    source.read(PHASE_TRAILING_LINE, allow_eof=True)

    logger.debug(f"read table={table.name} columns={n_columns} rows={n_rows}")
    return table


def read_table(stream: TextIO, version: ReportVersion = CURRENT_VERSION, *, strict: bool = False) -> Table:
    """Read one table from ``stream`` written in ``version`` format."""
    return _read_table(_LineSource(stream), version, strict)


def read_report(stream: TextIO, *, strict: bool = False) -> Report:
    """Read a version header line followed by the tables it announces."""
    source = _LineSource(stream)
    header = source.read(PHASE_HEADER)
    version = ReportVersion.from_header(header)
    version.require_readable()

    fields = header.split(SEPARATOR)
    n_tables = _parse_count(source, fields, 2, "table count")
    report = Report()
    for _ in range(n_tables):
        report.add(_read_table(source, version, strict))
    return report


def loads_table(text: str, version: ReportVersion = CURRENT_VERSION, *, strict: bool = False) -> Table:
    return read_table(io.StringIO(text), version, strict=strict)


def loads_report(text: str, *, strict: bool = False) -> Report:
    return read_report(io.StringIO(text), strict=strict)
