"""Layout of a table view into box-drawn text lines.

A table is emitted as a sequence of blocks separated by horizontal rules::

    edge -> header row -> row -> [description ...] -> row ... -> edge

Each rule is drawn from the kinds of the blocks above and below it. A row
has a column boundary at every interior position; a description keeps only
the boundary after column 1 (the empty gutter under the first cell) and
merges columns 2..N into one area. The junction at each position follows
from which side has a boundary there: both gives ``┼``, only below gives
``┬``, only above gives ``┴``, neither gives a plain ``─``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from boxtable.style import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    BOTTOM_T,
    CROSS,
    H_LINE,
    LEFT_T,
    RIGHT_T,
    TOP_LEFT,
    TOP_RIGHT,
    TOP_T,
    V_LINE,
    TableTheme,
)
from boxtable.types import Description, TableView
from boxtable.utils import truncate_to_width, visible_width
from boxtable.wrap import wrap_bullet, wrap_cell

BlockKind = Literal["edge", "row", "description"]


@dataclass
class RenderOptions:
    """Styling switches for one render."""

    styling: bool = False
    dim_border: bool = False
    borderless: bool = False
    theme: TableTheme = field(default_factory=TableTheme)


class TableLayout:
    """Turn a :class:`TableView` and its column widths into display lines."""

    def __init__(
        self,
        view: TableView,
        widths: list[int],
        options: RenderOptions | None = None,
    ) -> None:
        self._view = view
        self._widths = list(widths[: view.column_count])
        self._widths += [0] * (view.column_count - len(self._widths))
        self._options = options or RenderOptions()

    # -- public -------------------------------------------------------------

    def render(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def lines(self) -> list[str]:
        view = self._view
        has_columns = bool(self._widths)

        out: list[str] = [self._rule("edge", "row")]
        out.extend(self._row_lines(view.headers, header=True))
        out.append(self._rule("row", "row"))

        last_row = len(view.rows) - 1
        for ri, row in enumerate(view.rows):
            out.extend(self._row_lines(row))

            above: BlockKind = "row"
            descriptions = view.descriptions.get(ri, []) if has_columns else []
            for desc in descriptions:
                out.append(self._rule(above, "description"))
                out.extend(self._description_lines(desc))
                above = "description"

            out.append(self._rule(above, "row" if ri < last_row else "edge"))

        if not view.rows:
            out.append(self._rule("row", "edge"))

        return out

    # -- borders ------------------------------------------------------------

    def _border(self, text: str) -> str:
        opts = self._options
        if opts.borderless:
            return " " * len(text)
        if opts.dim_border and opts.styling:
            return opts.theme.dimmed(text)
        return text

    def _has_boundary(self, kind: BlockKind, position: int) -> bool:
        if kind == "row":
            return True
        if kind == "description":
            return position == 0 and self._has_gutter()
        return False

    def _junction(self, above: BlockKind, below: BlockKind, position: int) -> str:
        up = self._has_boundary(above, position)
        down = self._has_boundary(below, position)
        if up and down:
            return CROSS
        if down:
            return TOP_T
        if up:
            return BOTTOM_T
        return H_LINE

    def _rule(self, above: BlockKind, below: BlockKind) -> str:
        """Draw the horizontal rule between a block of kind *above* and *below*."""
        segments = [w + 2 for w in self._widths]

        if below == "description" and self._has_gutter():
            # The first column carries on as an empty gutter cell
            lead = self._border(V_LINE) + " " * segments[0]
            first = 1
            left = LEFT_T
        else:
            lead = ""
            first = 0
            if above == "edge":
                left = TOP_LEFT
            elif below == "edge":
                left = BOTTOM_LEFT
            else:
                left = LEFT_T

        if above == "edge":
            right = TOP_RIGHT
        elif below == "edge":
            right = BOTTOM_RIGHT
        else:
            right = RIGHT_T

        parts = [left]
        for position in range(first, len(segments)):
            if position > first:
                parts.append(self._junction(above, below, position - 1))
            parts.append(H_LINE * segments[position])
        parts.append(right)

        return lead + self._border("".join(parts))

    # -- rows ---------------------------------------------------------------

    def _highlight(self, text: str, col: int) -> str:
        opts = self._options
        if not text or not opts.styling or col not in self._view.highlighted:
            return text
        return opts.theme.emphasized(text)

    def _cell(self, content: str, col: int) -> str:
        """Pad *content* to its column width with one space on each side."""
        width = self._widths[col]
        alignments = self._view.alignments
        align = alignments[col] if col < len(alignments) else "left"
        pad = max(0, width - visible_width(content))

        if align == "right":
            return f" {' ' * pad}{content} "
        if align == "center":
            left = pad // 2
            return f" {' ' * left}{content}{' ' * (pad - left)} "
        return f" {content}{' ' * pad} "

    def _row_lines(self, cells: list[str], header: bool = False) -> list[str]:
        """Render one row, possibly spanning several display lines."""
        wrapped: list[list[str]] = []
        for col, width in enumerate(self._widths):
            text = cells[col] if col < len(cells) else ""
            lines = wrap_cell(text, width)
            if header:
                lines = [self._highlight(line, col) for line in lines]
            wrapped.append(lines)

        height = max((len(lines) for lines in wrapped), default=0)
        separator = self._border(V_LINE)

        result: list[str] = []
        for line_no in range(height):
            parts = [separator]
            for col, lines in enumerate(wrapped):
                text = lines[line_no] if line_no < len(lines) else ""
                parts.append(self._cell(text, col))
                parts.append(separator)
            result.append("".join(parts))
        return result

    # -- descriptions -------------------------------------------------------

    def _has_gutter(self) -> bool:
        return len(self._widths) > 1

    def _merged_width(self) -> int:
        """Width of the area a description spans, between its side borders."""
        if not self._has_gutter():
            return sum(w + 2 for w in self._widths)
        rest = self._widths[1:]
        return sum(w + 2 for w in rest) + len(rest) - 1

    def _merged_line(self, text: str, merged: int) -> str:
        separator = self._border(V_LINE)
        lead = separator
        if self._has_gutter():
            lead += self._cell("", 0) + separator
        pad = max(0, merged - visible_width(text))
        return f"{lead}{text}{' ' * pad}{separator}"

    def _description_lines(self, desc: Description) -> list[str]:
        opts = self._options
        merged = self._merged_width()
        result: list[str] = []

        if desc.title:
            # " [ " + title + " ]" and one trailing space
            bracketed = merged >= 7
            room = merged - 6 if bracketed else merged - 1
            title = truncate_to_width(desc.title, room, ellipsis="…")
            if opts.styling:
                title = opts.theme.emphasized(title)
            text = f" [ {title} ]" if bracketed else f" {title}"
            result.append(self._merged_line(text, merged))

        marker = f" {opts.theme.bullet} "
        if merged <= visible_width(marker):
            # Too narrow for a marker: bullets use the whole area
            marker = ""
        indent = " " * visible_width(marker)
        text_width = max(merged - visible_width(marker) - 1, 1) if marker else merged

        for bullet in desc.body.split("\n"):
            bullet = bullet.strip()
            if not bullet:
                continue
            for i, line in enumerate(wrap_bullet(bullet, text_width)):
                result.append(self._merged_line((marker if i == 0 else indent) + line, merged))

        return result
