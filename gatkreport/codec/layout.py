from __future__ import annotations

from enum import IntEnum

"""Tokens and field positions of the text table format.

    #:GATKTable:<nCols>:<nRows>:<fmt1>:...:<fmtN>:;
    #:GATKTable:<name>:<description>
    <colName1>  <colName2>  ...
    <row cells, two-space separated, left-justified>
    <blank line>
"""

__all__ = [
    "TABLE_HEADER_PREFIX",
    "SEPARATOR",
    "END_MARKER",
    "COLUMN_GAP",
    "TableDataField",
    "TableNameField",
]

TABLE_HEADER_PREFIX = "#:GATKTable"
SEPARATOR = ":"
END_MARKER = ":;"
COLUMN_GAP = "  "


class TableDataField(IntEnum):
    """Token positions in header line 1 after splitting on SEPARATOR."""

    COLS = 2
    ROWS = 3
    FORMAT_START = 4


class TableNameField(IntEnum):
    """Token positions in header line 2."""

    NAME = 2
    DESCRIPTION = 3
