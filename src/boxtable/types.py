"""Shared value types for tables and their render views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Alignment = Literal["left", "right", "center"]

ALIGNMENTS: tuple[Alignment, ...] = ("left", "right", "center")


@dataclass
class Description:
    """An advisory block rendered beneath a row, merged across columns 2..N."""

    body: str
    title: str = ""


@dataclass
class TableView:
    """Snapshot of exactly what gets measured and drawn for one render.

    Rows are trimmed or padded to the header count, optional extra columns
    (row numbers) are already in place, and ``highlighted`` holds the header
    indices to draw in bold.
    """

    headers: list[str]
    rows: list[list[str]]
    descriptions: dict[int, list[Description]] = field(default_factory=dict)
    alignments: list[Alignment] = field(default_factory=list)
    max_widths: dict[int, int] = field(default_factory=dict)
    highlighted: set[int] = field(default_factory=set)

    @property
    def column_count(self) -> int:
        return len(self.headers)
