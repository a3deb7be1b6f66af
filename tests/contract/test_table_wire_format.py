from __future__ import annotations

import re

from gatkreport.codec.writer import dumps_report, dumps_table
from gatkreport.models.report import Report
from gatkreport.models.table import Table

"""Wire format contract: header lines, column alignment and table terminator."""

TABLE_HEADER = re.compile(r"^#:GATKTable:([0-9]+):([0-9]+)(:[^:]+)*:;$")
NAME_LINE = re.compile(r"^#:GATKTable:[A-Za-z0-9_.\-]+:.*$")
REPORT_HEADER = re.compile(r"^#:GATKReport\.v1\.1:([0-9]+)$")


def _table() -> Table:
    t = Table("Depth", "mean depth per sample", 3)
    t.add_column("sample", "%s")
    t.add_column("reads", "%d")
    t.add_column("mean", "%.2f")
    t.set("NA12878", "sample", "NA12878")
    t.set("NA12878", "reads", 1200)
    t.set("NA12878", "mean", 31.456)
    t.set("HG002", "sample", "HG002")
    t.set("HG002", "reads", 80)
    t.set("HG002", "mean", 2.0)
    return t


def test_table_header_lines():
    lines = dumps_table(_table()).split("\n")
    m = TABLE_HEADER.match(lines[0])
    assert m
    assert (m.group(1), m.group(2)) == ("3", "2")
    assert lines[0] == "#:GATKTable:3:2:%s:%d:%.2f:;"
    assert NAME_LINE.match(lines[1])
    assert lines[1] == "#:GATKTable:Depth:mean depth per sample"


def test_columns_are_left_aligned_with_two_space_gap():
    lines = dumps_table(_table()).split("\n")
    assert lines[2] == "sample   reads  mean "
    # rows sorted by row id: HG002 < NA12878
    assert lines[3] == "HG002    80     2.00 "
    assert lines[4] == "NA12878  1200   31.46"
    assert len({len(line) for line in lines[2:5]}) == 1


def test_table_ends_with_blank_line():
    text = dumps_table(_table())
    assert text.endswith("\n\n")
    assert text.count("\n") == 6


def test_report_header_and_table_order():
    report = Report()
    for name in ("zeta", "alpha"):
        t = report.add_table(name, "", 1)
        t.add_column("v", "%d")
        t.set(0, "v", 1)
    text = dumps_report(report)
    lines = text.split("\n")
    m = REPORT_HEADER.match(lines[0])
    assert m and m.group(1) == "2"
    assert lines[2] == "#:GATKTable:alpha:"
    assert "#:GATKTable:zeta:" in lines


def test_empty_table_has_only_headers():
    t = Table("Empty", "nothing yet", 1)
    t.add_column("name", "%s")
    assert dumps_table(t) == "#:GATKTable:1:0:%s:;\n#:GATKTable:Empty:nothing yet\nname\n\n"
