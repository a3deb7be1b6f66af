from __future__ import annotations

import pytest

from gatkreport.codec.version import CURRENT_VERSION, ReportVersion
from gatkreport.errors import UnsupportedVersionError


@pytest.mark.parametrize(
    "line, expected",
    [
        ("#:GATKReport.v1.1:3", ReportVersion.V1_1),
        ("#:GATKReport.v1.0:1", ReportVersion.V1_0),
        ("#:GATKReport.v0.2", ReportVersion.V0_2),
    ],
)
def test_from_header(line, expected):
    assert ReportVersion.from_header(line) is expected


@pytest.mark.parametrize("line", ["", "#:GATKReport.v9.9:1", "#:GATKTable:1:1:%s:;", "hello"])
def test_from_header_unknown(line):
    with pytest.raises(UnsupportedVersionError):
        ReportVersion.from_header(line)


def test_only_current_version_is_readable():
    assert CURRENT_VERSION is ReportVersion.V1_1
    CURRENT_VERSION.require_readable()
    for version in ReportVersion:
        if version is not CURRENT_VERSION:
            assert not version.readable
            with pytest.raises(UnsupportedVersionError) as e:
                version.require_readable()
            assert e.value.phase == "header"
