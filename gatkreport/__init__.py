"""Typed columnar report tables with a fixed-width text format."""

from .codec import (
    CURRENT_VERSION,
    ReportVersion,
    dumps_report,
    dumps_table,
    loads_report,
    loads_table,
    read_report,
    read_table,
    write_report,
    write_table,
)
from .errors import (
    BoundsError,
    CoercionError,
    ConsistencyError,
    FormatError,
    ReportError,
    StructureMismatchError,
    TypeMismatchError,
    UnsupportedVersionError,
    ValidationError,
)
from .models import NOT_FOUND, Char, Column, DataType, Report, Table, classify, try_parse

__all__ = [
    "Char",
    "Column",
    "DataType",
    "NOT_FOUND",
    "Report",
    "Table",
    "classify",
    "try_parse",
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
    "ReportError",
    "ValidationError",
    "BoundsError",
    "TypeMismatchError",
    "CoercionError",
    "FormatError",
    "UnsupportedVersionError",
    "ConsistencyError",
    "StructureMismatchError",
]
