from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Shard progress for the gather command.

One tqdm bar advances per shard read and shows the running row total. No bar
is drawn unless stdout is a terminal, so redirected output stays plain text.
"""

__all__ = [
    "ShardProgress",
    "is_tty_enabled",
]

BAR_OPTIONS: dict[str, Any] = {"unit": "shard", "leave": True, "position": 0, "ncols": 80, "ascii": True}


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ShardProgress:
    """Counts shards and rows read so far; draws a bar only on a terminal."""

    def __init__(self, shards: int, *, label: str = "Gathering shards", enabled: bool = True) -> None:
        self.shards = shards
        self.label = label
        self.shards_read = 0
        self.rows_read = 0
        self._bar: TqdmType[Any] | None = None
        if enabled and is_tty_enabled():
            self._bar = tqdm(total=shards, desc=label, **BAR_OPTIONS)

    @property
    def drawing(self) -> bool:
        return self._bar is not None

    def reading(self, path: Path) -> None:
        if self._bar is not None:
            self._bar.set_description(f"{self.label} ({path.name})")

    def read(self, rows: int) -> None:
        """Record one finished shard holding ``rows`` rows."""
        self.shards_read += 1
        self.rows_read += rows
        if self._bar is not None:
            self._bar.set_description(self.label)
            self._bar.set_postfix(rows=self.rows_read)
            self._bar.update(1)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def __enter__(self) -> ShardProgress:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
