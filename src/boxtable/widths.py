"""Column width allocation.

Widths are content widths: the printable columns inside a cell, excluding
the one space of padding on each side and the border glyphs. A table with
widths ``w`` occupies ``1 + sum(w_i + 3)`` terminal columns.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from boxtable.utils import visible_width

logger = logging.getLogger(__name__)

GLOBAL_MAX_COLUMN_WIDTH = 50
MIN_COLUMN_WIDTH = 3


def minimum_widths(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    max_widths: Mapping[int, int] | None = None,
) -> list[int]:
    """Return the width each column needs to show its widest header or cell.

    Escape sequences do not count. The result is capped at
    :data:`GLOBAL_MAX_COLUMN_WIDTH` and at ``max_widths[i]`` when present.
    Cells beyond the header count are ignored.
    """
    max_widths = max_widths or {}
    widths = [visible_width(h) for h in headers]

    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            w = visible_width(cell)
            if w > widths[i]:
                widths[i] = w

    for i, w in enumerate(widths):
        cap = GLOBAL_MAX_COLUMN_WIDTH
        if i in max_widths:
            cap = min(cap, max_widths[i])
        widths[i] = max(0, min(w, cap))

    return widths


def table_width(widths: Sequence[int]) -> int:
    """Total terminal columns used by a table with these content widths."""
    total = 1  # left border
    for w in widths:
        total += w + 2 + 1  # content + padding + separator
    return total


def shrink_widths(widths: Sequence[int], console_width: int) -> list[int]:
    """Narrow the widest columns until the table fits *console_width*.

    Columns never go below :data:`MIN_COLUMN_WIDTH`; if the table still does
    not fit once every column is at the floor it is left overflowing.
    """
    result = list(widths)
    excess = table_width(result) - console_width

    while excess > 0:
        widest, idx = 0, -1
        for i, w in enumerate(result):
            if w > widest and w > MIN_COLUMN_WIDTH:
                widest, idx = w, i
        if idx < 0:
            break

        reduce_by = 1
        if excess > 5 and result[idx] > 10:
            # Big gaps come off in larger steps
            reduce_by = min(excess // 5, result[idx] - MIN_COLUMN_WIDTH)

        result[idx] -= reduce_by
        excess -= reduce_by

    return result


def expand_widths(
    widths: Sequence[int],
    console_width: int,
    max_widths: Mapping[int, int] | None = None,
) -> list[int]:
    """Spread the slack up to *console_width* evenly over the columns.

    Columns already at their per-column cap are skipped; the remainder of an
    uneven split goes to the first expandable columns.
    """
    max_widths = max_widths or {}
    result = list(widths)
    extra = console_width - table_width(result)
    if extra <= 0:
        return result

    expandable = [
        i for i, w in enumerate(result) if i not in max_widths or w < max_widths[i]
    ]
    if not expandable:
        return result

    per_column, remainder = divmod(extra, len(expandable))
    for n, i in enumerate(expandable):
        result[i] += per_column
        if n < remainder:
            result[i] += 1
        if i in max_widths and result[i] > max_widths[i]:
            result[i] = max_widths[i]

    return result


def fit_to_console(
    widths: Sequence[int],
    console_width: int,
    fill: bool = False,
    max_widths: Mapping[int, int] | None = None,
) -> list[int]:
    """Shrink *widths* to fit *console_width*, or expand them when *fill* is set."""
    total = table_width(widths)
    if total > console_width:
        result = shrink_widths(widths, console_width)
        logger.debug("shrunk widths %s -> %s to fit %d", list(widths), result, console_width)
        return result
    if fill and total < console_width:
        result = expand_widths(widths, console_width, max_widths)
        logger.debug("expanded widths %s -> %s to fill %d", list(widths), result, console_width)
        return result
    return list(widths)
