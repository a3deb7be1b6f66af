from __future__ import annotations

"""Exception taxonomy for report tables.

Every error raised by the table engine derives from ReportError so callers
(gather service, CLI) can catch one type. None of these are retried internally.
"""

__all__ = [
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


class ReportError(Exception):
    """Base exception for report table errors."""


class ValidationError(ReportError):
    """Raised for an invalid table name, column name or description."""


class BoundsError(ReportError):
    """Raised when a row or column position (or id / name) does not exist."""


class TypeMismatchError(ReportError):
    """Raised when a value's classification conflicts with a column's declared type."""


class CoercionError(ReportError):
    """Raised in strict mode when text cannot be parsed into the declared type."""


class FormatError(ReportError):
    """Raised when a serialized table cannot be read.

    ``phase`` names the step that failed (header, column names, data line,
    trailing blank line).
    """

    def __init__(self, message: str, phase: str | None = None, line: int = -1) -> None:
        super().__init__(message)
        self.phase = phase
        self.line = line


class UnsupportedVersionError(FormatError):
    """Raised for any report version other than the one the reader understands."""


class ConsistencyError(ReportError):
    """Raised when row ids cannot be used to order rows at write time."""


class StructureMismatchError(ReportError):
    """Raised when merging tables or reports with different formats."""
