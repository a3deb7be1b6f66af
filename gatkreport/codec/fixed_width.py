from __future__ import annotations

"""Fixed-width line splitting.

Column boundaries are recovered from the column-name line: a column starts
wherever a non-blank character follows a blank one. Data lines are then cut at
the same offsets rather than split on a delimiter, so values may be shorter
than their column.
"""

__all__ = [
    "word_starts",
    "split_fixed_width",
]


def word_starts(line: str) -> list[int]:
    """Offsets (excluding 0) where a word begins after whitespace."""
    return [i for i in range(1, len(line)) if line[i - 1].isspace() and not line[i].isspace()]


def split_fixed_width(line: str, starts: list[int]) -> list[str]:
    """Cut ``line`` at ``starts`` and strip each piece; yields ``len(starts) + 1`` fields."""
    fields: list[str] = []
    last = 0
    for start in starts:
        fields.append(line[last:start].strip())
        last = start
    fields.append(line[last:].strip())
    return fields
