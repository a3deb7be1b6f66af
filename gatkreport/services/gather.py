from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..codec.reader import read_report
from ..config.loader import ReportConfig
from ..errors import FormatError, ReportError, StructureMismatchError, UnsupportedVersionError
from ..logging.error_log import ErrorLogBuffer
from ..models.error_record import ErrorRecord
from ..models.gather_result import GatherResult, ShardStat
from ..models.report import Report
from .progress import ShardProgress

"""Gather shard reports into one report.

Each worker of a scattered computation writes its own report with identically
shaped tables. Gathering reads the shards in the order given and folds them
with ``Report.concat``, so rows of earlier shards come first. Any shard that
cannot be read or does not match the first one aborts the gather.
"""

__all__ = [
    "GatherError",
    "read_report_file",
    "error_type_of",
    "gather_reports",
]

logger = logging.getLogger(__name__)


class GatherError(Exception):
    """Raised when a shard cannot be read or merged."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


def read_report_file(path: Path, strict: bool = False) -> Report:
    with path.open("r", encoding="utf-8") as f:
        return read_report(f, strict=strict)


def error_type_of(exc: BaseException) -> str:
    if isinstance(exc, UnsupportedVersionError):
        return "UNSUPPORTED_VERSION"
    if isinstance(exc, FormatError):
        return "FORMAT_ERROR"
    if isinstance(exc, StructureMismatchError):
        return "STRUCTURE_MISMATCH"
    if isinstance(exc, OSError):
        return "READ_ERROR"
    return "REPORT_ERROR"


def _total_rows(report: Report) -> int:
    return sum(t.num_rows for t in report.tables)


def gather_reports(
    paths: Sequence[Path],
    config: ReportConfig | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> tuple[Report, GatherResult]:
    """Read and concatenate shard report files.

    Args:
        paths: shard files, in merge order
        config: settings (strict parsing, progress bar)
        error_log: buffer receiving one ErrorRecord for the failing shard

    Returns:
        The merged report and its GatherResult

    Raises:
        GatherError: no shards given, or a shard failed to read or merge
    """
    if not paths:
        raise GatherError("no shard files given", Path("."))
    config = config or ReportConfig()

    start_time = datetime.now(UTC)
    t0 = time.perf_counter()
    merged: Report | None = None
    stats: list[ShardStat] = []

    with ShardProgress(len(paths), enabled=config.show_progress) as progress:
        for path in paths:
            progress.reading(path)
            shard_t0 = time.perf_counter()
            try:
                shard = read_report_file(path, strict=config.strict_parsing)
                if merged is None:
                    merged = shard
                else:
                    merged.concat(shard)
            except (ReportError, OSError) as e:
                if error_log is not None:
                    line = e.line if isinstance(e, FormatError) else -1
                    error_log.append(ErrorRecord.create(str(path), "", line, error_type_of(e), str(e)))
                raise GatherError(f"shard {path}: {e}", path) from e

            rows = _total_rows(shard)
            stats.append(ShardStat(path.name, len(shard), rows, time.perf_counter() - shard_t0))
            logger.debug(f"shard={path.name} tables={len(shard)} rows={rows}")
            progress.read(rows)

    if merged is None:
        raise GatherError("no shard could be read", paths[0])
    end_time = datetime.now(UTC)
    result = GatherResult(
        shards=len(paths),
        tables=len(merged),
        total_rows=_total_rows(merged),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=time.perf_counter() - t0,
        shard_stats=stats,
    )
    return merged, result
