"""Text serialization of report tables."""

from .reader import loads_report, loads_table, read_report, read_table
from .version import CURRENT_VERSION, ReportVersion
from .writer import dumps_report, dumps_table, write_report, write_table

__all__ = [
    "CURRENT_VERSION",
    "ReportVersion",
    "read_table",
    "read_report",
    "loads_table",
    "loads_report",
    "write_table",
    "write_report",
    "dumps_table",
    "dumps_report",
]
