from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Result model for folding shard reports into one report."""

__all__ = [
    "GatherResult",
    "ShardStat",
]


@dataclass(frozen=True)
class ShardStat:
    """Per-shard statistics."""
    file_name: str
    tables: int
    rows: int  # rows summed over all tables of the shard
    elapsed_seconds: float


@dataclass(frozen=True)
class GatherResult:
    """Aggregated figures for the SUMMARY line."""
    shards: int
    tables: int
    total_rows: int  # rows in the merged report
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    shard_stats: list[ShardStat] | None = None
