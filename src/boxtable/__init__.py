"""boxtable: box-drawn terminal tables with per-row description blocks."""

# Tables and groups
from boxtable.group import TableGroup
from boxtable.table import Table

# Layout
from boxtable.layout import RenderOptions, TableLayout

# Styling
from boxtable.style import TableTheme

# Terminal interface and implementation
from boxtable.terminal import DEFAULT_COLUMNS, ProcessTerminal, Terminal

# Value types
from boxtable.types import Alignment, Description, TableView

# Utilities
from boxtable.utils import split_ansi_wrapper, strip_ansi, truncate_to_width, visible_width
from boxtable.widths import fit_to_console, minimum_widths
from boxtable.wrap import wrap_bullet, wrap_cell

__all__ = [
    # Tables and groups
    "Table",
    "TableGroup",
    # Layout
    "RenderOptions",
    "TableLayout",
    # Styling
    "TableTheme",
    # Terminal
    "DEFAULT_COLUMNS",
    "ProcessTerminal",
    "Terminal",
    # Value types
    "Alignment",
    "Description",
    "TableView",
    # Utilities
    "fit_to_console",
    "minimum_widths",
    "split_ansi_wrapper",
    "strip_ansi",
    "truncate_to_width",
    "visible_width",
    "wrap_bullet",
    "wrap_cell",
]
