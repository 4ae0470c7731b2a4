"""
Line classification for the cleanup pipeline.
"""

from dataclasses import dataclass


def is_blank(line: str) -> bool:
    """Empty or whitespace-only."""
    return not line.strip()


def is_heading(line: str) -> bool:
    """ATX heading: the line starts with one or more '#'."""
    return line.startswith("#")


def is_table_row(line: str) -> bool:
    """Pipe-table row: starts with '|' once leading spaces and tabs are removed."""
    return line.lstrip(" \t").startswith("|")


@dataclass(frozen=True)
class LineInfo:
    """A line together with its derived flags."""
    text: str
    is_blank: bool
    is_heading: bool
    is_table_row: bool

    @classmethod
    def of(cls, line: str) -> "LineInfo":
        return cls(
            text=line,
            is_blank=is_blank(line),
            is_heading=is_heading(line),
            is_table_row=is_table_row(line),
        )
