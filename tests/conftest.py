# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from gatkreport.codec.writer import write_report
from gatkreport.logging.init import reset_logging
from gatkreport.models.report import Report
from gatkreport.models.table import Table


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "shards").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """codec:
  strict_parsing: false
output:
  show_progress: false
  log_level: INFO
  error_log_dir: logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "gatkreport.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def example_table() -> Table:
    """Two-column table: id (%s), count (%d) with one row a / 5."""
    t = Table("T", "desc", 2)
    t.add_column("id", "%s")
    t.add_column("count", "%d")
    t.set(0, "id", "a")
    t.set(0, "count", 5)
    return t


def _make_shard(counts: dict[str, int]) -> Report:
    """Shard report with one CountsByKey table, rows kept in insertion order."""
    report = Report()
    table = report.add_table("CountsByKey", "Counts per key", 2, sort_by_row_id=False)
    table.add_column("key", "%s")
    table.add_column("count", "%d")
    for key, count in counts.items():
        table.set(key, "key", key)
        table.set(key, "count", count)
    return report


@pytest.fixture()
def make_shard():
    return _make_shard


@pytest.fixture()
def shard_files(temp_workdir: Path) -> list[Path]:
    shards = [
        {"chr1": 10, "chr2": 4},
        {"chr3": 7},
        {"chrX": 1, "chrY": 123456},
    ]
    paths = []
    for i, counts in enumerate(shards):
        path = temp_workdir / "shards" / f"shard{i}.grp"
        with path.open("w", encoding="utf-8") as out:
            write_report(_make_shard(counts), out)
        paths.append(path)
    return paths
