from __future__ import annotations

import pandas as pd

from gatkreport.models.report import Report
from gatkreport.models.table import Table
from gatkreport.services.export import report_to_frames, table_to_dataframe


def test_table_to_dataframe(example_table: Table):
    df = table_to_dataframe(example_table)
    assert list(df.columns) == ["id", "count"]
    assert df.shape == (1, 2)
    assert df.loc[0, "id"] == "a"
    assert df.loc[0, "count"] == 5


def test_dataframe_follows_row_id_order():
    t = Table("S", "", 1)
    t.add_column("v", "%s")
    t.set("b", "v", "second")
    t.set("a", "v", "first")
    assert table_to_dataframe(t)["v"].tolist() == ["first", "second"]
    assert table_to_dataframe(t, ordered=False)["v"].tolist() == ["second", "first"]


def test_empty_cells_become_missing():
    t = Table("N", "", 2, sort_by_row_id=False)
    t.add_column("k", "%s")
    t.add_column("n", "%d")
    t.set("x", "k", "x")
    df = table_to_dataframe(t)
    assert pd.isna(df.loc[0, "n"])


def test_empty_table_keeps_columns():
    t = Table("E", "", 2)
    t.add_column("a", "%s")
    t.add_column("b", "%d")
    df = table_to_dataframe(t)
    assert list(df.columns) == ["a", "b"]
    assert len(df) == 0


def test_report_to_frames():
    report = Report.simple("Simple", "k", "v")
    report.add_row("x", 1.5)
    frames = report_to_frames(report)
    assert list(frames) == ["Simple"]
    assert frames["Simple"]["v"].tolist() == [1.5]
