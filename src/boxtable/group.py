"""TableGroup: several tables sharing one set of column widths."""

from __future__ import annotations

import logging

from boxtable.table import Table
from boxtable.widths import GLOBAL_MAX_COLUMN_WIDTH, minimum_widths

logger = logging.getLogger(__name__)


class TableGroup:
    """Tables that should line up column for column when printed together.

    Add every member first, then call :meth:`sync_column_widths` once before
    rendering any of them. Members hold only a weak reference back to the
    group; the group owns the shared width vector.
    """

    def __init__(self) -> None:
        self._tables: list[Table] = []
        self._column_widths: list[int] = []

    @property
    def tables(self) -> list[Table]:
        return list(self._tables)

    @property
    def column_widths(self) -> list[int]:
        return list(self._column_widths)

    def get_tables(self) -> list[Table]:
        return self.tables

    def add(self, table: Table) -> None:
        self._tables.append(table)
        table._attach_group(self)

    def sync_column_widths(self) -> None:
        """Give every member the column-wise maximum of their minimum widths.

        Columns are matched by position over the prefix all members share.
        Each shared width is capped by the global cap and by the smallest
        per-column cap any member declares for it. Every member then fits
        the result to its own console width.
        """
        if not self._tables:
            return

        views = [table.view() for table in self._tables]
        shared = min(view.column_count for view in views)

        widths = [0] * shared
        caps = [GLOBAL_MAX_COLUMN_WIDTH] * shared
        for view in views:
            needed = minimum_widths(view.headers, view.rows, view.max_widths)
            for i in range(shared):
                widths[i] = max(widths[i], needed[i])
                if i in view.max_widths:
                    caps[i] = min(caps[i], view.max_widths[i])

        self._column_widths = [min(w, cap) for w, cap in zip(widths, caps)]
        logger.debug(
            "synced %d tables to widths %s", len(self._tables), self._column_widths
        )

        for table in self._tables:
            table._apply_group_widths(self._column_widths)
