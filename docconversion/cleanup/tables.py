"""
Pipe-table alignment.

Consecutive pipe-table rows are grouped into blocks and each block is
reflowed so that every column is padded to its widest cell:

    | a | bb |          |a  |bb|
    | ccc | d |   ->    |ccc|d |

Blocks whose rows have differing cell counts are padded with empty cells up
to the widest row instead of failing.
"""

import logging
from typing import Iterable

from .lines import is_table_row

logger = logging.getLogger(__name__)


def split_row(line: str) -> list[str]:
    """
    Split a table row into trimmed cells.

    Only the empty tokens produced by the outer pipes are discarded; an empty
    interior cell (`|a||b|`) is kept as "".
    """
    tokens = line.strip().split("|")
    if tokens and tokens[0].strip() == "":
        tokens = tokens[1:]
    if tokens and tokens[-1].strip() == "":
        tokens = tokens[:-1]
    return [token.strip() for token in tokens]


def column_widths(table: list[list[str]]) -> list[int]:
    """Max cell length per column; missing cells count as empty."""
    count = max(len(row) for row in table)
    return [
        max(len(row[i]) if i < len(row) else 0 for row in table)
        for i in range(count)
    ]


def format_table(rows: list[str]) -> list[str]:
    """Reflow one block of table rows. An empty block is returned as is."""
    if not rows:
        return list(rows)

    table = [split_row(row) for row in rows]
    widths = column_widths(table)

    if any(len(cells) != len(widths) for cells in table):
        logger.warning(
            "Table with inconsistent column counts (%s); padding to %d columns",
            sorted({len(cells) for cells in table}), len(widths),
        )

    result = []
    for cells in table:
        padded = cells + [""] * (len(widths) - len(cells))
        result.append("|" + "".join(f"{cell.ljust(width)}|" for cell, width in zip(padded, widths)))
    return result


def format_tables(lines: Iterable[str]) -> list[str]:
    """
    Reflow every maximal run of table rows, passing other lines through.

    Streaming grouping: rows accumulate in a buffer which is flushed on the
    first non-table line and once more at end of input.
    """
    result = []
    buffer = []
    blocks = 0

    for line in lines:
        if is_table_row(line):
            buffer.append(line)
            continue
        if buffer:
            result.extend(format_table(buffer))
            blocks += 1
            buffer = []
        result.append(line)

    if buffer:
        result.extend(format_table(buffer))
        blocks += 1

    if blocks:
        logger.debug("Reflowed %d table blocks", blocks)
    return result
