from __future__ import annotations

import pandas as pd

from ..models.report import Report
from ..models.table import Table

"""pandas export of report tables.

Rows are taken in write order (by row id for sorted tables) and empty cells
become None. Values keep the Python objects the table stores; pandas infers
column dtypes from them.
"""

__all__ = [
    "table_to_dataframe",
    "report_to_frames",
]


def table_to_dataframe(table: Table, ordered: bool = True) -> pd.DataFrame:
    """Build a DataFrame with one column per table column, in order."""
    rows = table.ordered_rows() if ordered else list(table.rows())
    return pd.DataFrame(rows, columns=table.column_names())


def report_to_frames(report: Report) -> dict[str, pd.DataFrame]:
    return {table.name: table_to_dataframe(table) for table in report.tables}
