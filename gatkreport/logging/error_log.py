from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import ErrorRecord

"""Per-run error log.

Each run owns one file, ``<logs_dir>/errors-YYYYMMDD-HHMMSS.log``, stamped with
the UTC time the run started. Records stay in memory until ``flush`` appends
them as JSON Lines; a run without errors leaves no file and no directory.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

logger = logging.getLogger(__name__)

LOGS_DIR = Path("./logs")


def log_file_name(started: datetime) -> str:
    return f"errors-{started:%Y%m%d-%H%M%S}.log"


class ErrorLogBuffer:
    """Pending ErrorRecords of one run."""

    def __init__(self, logs_dir: Path | None = None, *, started: datetime | None = None) -> None:
        self.logs_dir = logs_dir or LOGS_DIR
        self.file_path = self.logs_dir / log_file_name(started or datetime.now(UTC))
        self._pending: list[ErrorRecord] = []

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._pending)

    def append(self, record: ErrorRecord) -> None:
        self._pending.append(record)

    def __len__(self) -> int:
        return len(self._pending)

    def flush(self) -> Path | None:
        """Write pending records; None when there was nothing to write."""
        if not self._pending:
            return None
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        with self.file_path.open("a", encoding="utf-8") as f:
            f.writelines(f"{record.to_json_line()}\n" for record in self._pending)
        logger.debug(f"flushed {len(self._pending)} error records to {self.file_path}")
        self._pending.clear()
        return self.file_path
