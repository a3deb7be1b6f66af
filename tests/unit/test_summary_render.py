from __future__ import annotations

import re
from datetime import UTC, datetime

import pytest

from gatkreport.models.gather_result import GatherResult
from gatkreport.services.summary import format_seconds, render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+shards=([0-9]+)\s+tables=([0-9]+)\s+rows=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def _result(elapsed: float) -> GatherResult:
    now = datetime(2024, 1, 1, tzinfo=UTC)
    return GatherResult(
        shards=3, tables=2, total_rows=120, start_time=now, end_time=now, elapsed_seconds=elapsed
    )


def test_render_summary_line():
    assert render_summary_line(_result(2.0)) == "SUMMARY shards=3 tables=2 rows=120 elapsed_sec=2"


@pytest.mark.parametrize("elapsed", [0.0, 0.00042, 0.84, 1.23456, 17.0])
def test_summary_matches_contract_pattern(elapsed):
    assert SUMMARY_PATTERN.match(render_summary_line(_result(elapsed)))


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0"),
        (2.0, "2"),
        (0.001234, "0.001234"),
        (0.0000001, "0"),
        (1.23456, "1.235"),
        (0.5, "0.5"),
    ],
)
def test_format_seconds(seconds, expected):
    assert format_seconds(seconds) == expected
