from __future__ import annotations

from ..models.gather_result import GatherResult

"""SUMMARY line rendering for the gather command."""

__all__ = [
    "render_summary_line",
    "format_seconds",
]


def format_seconds(seconds: float) -> str:
    """Render a duration without trailing zeros or scientific notation."""
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_summary_line(result: GatherResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY shards={shards} tables={tables} rows={rows} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = GatherResult(
        ...     shards=3, tables=2, total_rows=120,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY shards=3 tables=2 rows=120 elapsed_sec=2'
    """
    return (
        f"SUMMARY shards={result.shards} "
        f"tables={result.tables} "
        f"rows={result.total_rows} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )
