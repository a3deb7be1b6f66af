"""Domain models for report tables.

DataType, Column and RowStore are the building blocks of Table; Report groups
tables written to one stream.
"""

from .column import Column
from .data_type import Char, DataType, classify, try_parse
from .error_record import ErrorRecord
from .gather_result import GatherResult, ShardStat
from .report import Report
from .row_store import RowStore
from .table import NOT_FOUND, Table

__all__ = [
    # Cell values
    "Char",
    "DataType",
    "classify",
    "try_parse",
    # Table structure
    "Column",
    "RowStore",
    "Table",
    "NOT_FOUND",
    "Report",
    # Processing models
    "ErrorRecord",
    "GatherResult",
    "ShardStat",
]
