from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the JSON Lines error log.

A record describes one report file that could not be read or merged. ``line``
is -1 when the failure is not tied to a line of the file (missing file,
structural mismatch while merging).
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: report file being processed
        table: table name, empty when unknown
        line: 1-based line number in the file, -1 when unknown
        error_type: error classification in UPPER_SNAKE_CASE
        message: error description
    """
    timestamp: str
    file: str
    table: str
    line: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, table: str, line: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            table=table,
            line=line,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
