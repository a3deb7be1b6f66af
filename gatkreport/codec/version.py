from __future__ import annotations

from enum import Enum

from ..errors import UnsupportedVersionError

"""Report format versions.

Versions form a closed set. Only the newest one can be read; support for a new
layout is added as a new member, never by relaxing the check.
"""

__all__ = [
    "ReportVersion",
    "CURRENT_VERSION",
]

OLD_VERSION_MESSAGE = "We no longer support older versions of the GATK Tables"


class ReportVersion(Enum):
    """Report header tags, e.g. ``#:GATKReport.v1.1``."""

    V0_1 = "#:GATKReport.v0.1"
    V0_2 = "#:GATKReport.v0.2"
    V1_0 = "#:GATKReport.v1.0"
    V1_1 = "#:GATKReport.v1.1"

    @property
    def header(self) -> str:
        return self.value

    @property
    def readable(self) -> bool:
        return self is CURRENT_VERSION

    @classmethod
    def from_header(cls, line: str) -> ReportVersion:
        """Identify the version from a report header line."""
        tag = line.split(":")[:2]
        candidate = ":".join(tag)
        for member in cls:
            if candidate == member.value:
                return member
        raise UnsupportedVersionError(f"unrecognized report header: {line!r}", phase="header", line=1)

    def require_readable(self) -> None:
        if not self.readable:
            raise UnsupportedVersionError(f"{OLD_VERSION_MESSAGE} ({self.name})", phase="header")


CURRENT_VERSION = ReportVersion.V1_1
