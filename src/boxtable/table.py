"""Table: headers, rows and per-row descriptions rendered as box-drawn text."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Iterable, Sequence

from boxtable.layout import RenderOptions, TableLayout
from boxtable.style import TableTheme
from boxtable.terminal import ProcessTerminal, Terminal
from boxtable.types import ALIGNMENTS, Alignment, Description, TableView
from boxtable.utils import strip_ansi
from boxtable.widths import fit_to_console, minimum_widths

if TYPE_CHECKING:
    from boxtable.group import TableGroup

logger = logging.getLogger(__name__)

ROW_COUNT_HEADER = "#"


class Table:
    """A fixed set of columns that accumulates rows and description blocks.

    Console width and styling support are read once from *terminal*
    (``sys.stdout`` by default). Dim borders and bold headers start enabled
    exactly when styling is supported.

    Mutators taking a row or column index ignore indices that are out of
    range; nothing in this class raises for bad input.
    """

    def __init__(
        self,
        headers: Sequence[str],
        terminal: Terminal | None = None,
        theme: TableTheme | None = None,
    ) -> None:
        terminal = terminal if terminal is not None else ProcessTerminal()

        self.headers: list[str] = list(headers)
        self.rows: list[list[str]] = []
        self.descriptions: dict[int, list[Description]] = {}

        n = len(self.headers)
        self._column_widths: list[int] = [0] * n
        self._alignments: list[Alignment] = ["left"] * n
        self._max_widths: dict[int, int] = {}

        self._console_width = terminal.columns
        self._supports_styling = terminal.is_tty
        self._fill_width = False
        self._dim_border = self._supports_styling
        self._borderless = False
        self._highlight_all = self._supports_styling
        self._highlighted: list[int] = []
        self._row_count = False
        self._theme = theme if theme is not None else TableTheme()

        self._group_ref: weakref.ReferenceType[TableGroup] | None = None
        self._group_synced = False

    # -- read accessors -----------------------------------------------------

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def column_widths(self) -> list[int]:
        return list(self._column_widths)

    @property
    def alignments(self) -> list[Alignment]:
        return list(self._alignments)

    @property
    def max_widths(self) -> dict[int, int]:
        return dict(self._max_widths)

    @property
    def highlighted_headers(self) -> list[int]:
        return list(self._highlighted)

    @property
    def console_width(self) -> int:
        return self._console_width

    @property
    def fill_width(self) -> bool:
        return self._fill_width

    @property
    def supports_styling(self) -> bool:
        return self._supports_styling

    @property
    def group(self) -> TableGroup | None:
        if self._group_ref is None:
            return None
        return self._group_ref()

    # -- content ------------------------------------------------------------

    def _valid_row(self, index: int) -> bool:
        return 0 <= index < len(self.rows)

    def _valid_column(self, index: int) -> bool:
        return 0 <= index < len(self.headers)

    def add_row(self, cells: Sequence[str]) -> None:
        """Append a row, padding it with empty cells up to the header count.

        Cells beyond the header count are kept but never rendered.
        """
        row = list(cells)
        if len(row) < len(self.headers):
            row.extend([""] * (len(self.headers) - len(row)))
        self.rows.append(row)

    def add_description(self, row_index: int, body: str) -> None:
        """Attach an untitled description block beneath row *row_index*.

        Each line of *body* becomes one bullet.
        """
        self.add_description_with_title(row_index, "", body)

    def add_description_with_title(self, row_index: int, title: str, body: str) -> None:
        if not self._valid_row(row_index):
            return
        self.descriptions.setdefault(row_index, []).append(Description(body=body, title=title))

    # -- layout settings ----------------------------------------------------

    def set_alignment(self, column_index: int, alignment: Alignment) -> None:
        if self._valid_column(column_index) and alignment in ALIGNMENTS:
            self._alignments[column_index] = alignment

    def set_max_width(self, column_index: int, width: int) -> None:
        if self._valid_column(column_index):
            self._max_widths[column_index] = max(0, width)

    def set_fill_width(self, enabled: bool) -> None:
        self._fill_width = enabled

    def set_console_width(self, width: int) -> None:
        self._console_width = max(0, width)

    def enable_row_count(self, enabled: bool) -> None:
        """Prefix every row with its 1-based number in a ``#`` column.

        Changing the setting drops widths taken from a group sync until the
        group syncs again.
        """
        if enabled != self._row_count and self._group_synced:
            logger.debug("row count toggled after group sync; using own widths")
            self._group_synced = False
        self._row_count = enabled

    # -- styling settings ---------------------------------------------------

    def set_styling(self, enabled: bool) -> None:
        """Override whether escape sequences may be emitted at all."""
        self._supports_styling = enabled

    def set_dim_border(self, enabled: bool) -> None:
        self._dim_border = enabled

    def set_borderless(self, enabled: bool) -> None:
        self._borderless = enabled

    def set_header_highlighting(self, enabled: bool) -> None:
        """Draw every header in bold, regardless of the highlighted set."""
        self._highlight_all = enabled

    def set_highlighted_headers(self, indices: Iterable[int]) -> None:
        self._highlighted = [i for i in indices if self._valid_column(i)]

    def add_highlighted_header(self, index: int) -> None:
        if self._valid_column(index):
            self._highlighted.append(index)

    def clear_highlighted_headers(self) -> None:
        self._highlighted = []

    # -- rendering ----------------------------------------------------------

    def view(self) -> TableView:
        """Build the snapshot that widths are measured on and that gets drawn.

        Without styling support every escape sequence is stripped here, in
        the view only; the stored headers, rows and descriptions keep theirs.
        """
        clean = strip_ansi if not self._supports_styling else str
        n = len(self.headers)

        headers = [clean(h) for h in self.headers]
        rows = []
        for row in self.rows:
            cells = [clean(c) for c in row[:n]]
            cells.extend([""] * (n - len(cells)))
            rows.append(cells)
        descriptions = {
            ri: [Description(body=clean(d.body), title=clean(d.title)) for d in descs]
            for ri, descs in self.descriptions.items()
        }
        alignments = list(self._alignments)
        max_widths = dict(self._max_widths)
        highlighted = set(range(n)) if self._highlight_all else set(self._highlighted)

        if self._row_count:
            headers.insert(0, ROW_COUNT_HEADER)
            rows = [[str(i + 1), *cells] for i, cells in enumerate(rows)]
            alignments.insert(0, "right")
            max_widths = {col + 1: w for col, w in max_widths.items()}
            highlighted = {col + 1 for col in highlighted}
            if self._highlight_all:
                highlighted.add(0)

        return TableView(
            headers=headers,
            rows=rows,
            descriptions=descriptions,
            alignments=alignments,
            max_widths=max_widths,
            highlighted=highlighted,
        )

    def minimum_widths(self) -> list[int]:
        """Capped minimum content width of every rendered column."""
        view = self.view()
        return minimum_widths(view.headers, view.rows, view.max_widths)

    def _attach_group(self, group: TableGroup) -> None:
        self._group_ref = weakref.ref(group)
        self._group_synced = False

    def _apply_group_widths(self, widths: Sequence[int]) -> None:
        """Take the shared widths of the owning group, then fit the console.

        Columns past the shared prefix keep this table's own minimum widths.
        """
        view = self.view()
        own = minimum_widths(view.headers, view.rows, view.max_widths)
        shared = min(len(widths), len(own))
        own[:shared] = widths[:shared]
        self._column_widths = fit_to_console(
            own, self._console_width, self._fill_width, view.max_widths
        )
        self._group_synced = True

    def _resolve_widths(self, view: TableView) -> list[int]:
        if self._group_synced:
            widths = self._column_widths
        else:
            if self.group is not None:
                logger.debug("table rendered before its group synced; using its own widths")
            widths = minimum_widths(view.headers, view.rows, view.max_widths)

        self._column_widths = fit_to_console(
            widths, self._console_width, self._fill_width, view.max_widths
        )
        return self._column_widths

    def render(self) -> str:
        """Render the table; every line, the last included, ends with a newline."""
        view = self.view()
        widths = self._resolve_widths(view)
        options = RenderOptions(
            styling=self._supports_styling,
            dim_border=self._dim_border,
            borderless=self._borderless,
            theme=self._theme,
        )
        return TableLayout(view, widths, options).render()

    def __str__(self) -> str:
        return self.render()
