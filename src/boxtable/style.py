"""Box-drawing glyphs and the escape-code theme used when rendering tables."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Box-drawing glyphs
# ---------------------------------------------------------------------------

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
H_LINE = "─"
V_LINE = "│"
LEFT_T = "├"
RIGHT_T = "┤"
TOP_T = "┬"
BOTTOM_T = "┴"
CROSS = "┼"


# ---------------------------------------------------------------------------
# TableTheme
# ---------------------------------------------------------------------------


@dataclass
class TableTheme:
    """Escape codes and markers applied when styling is supported."""

    dim: str = "\x1b[2m\x1b[38;5;240m"  # faint, dark grey borders
    bold: str = "\x1b[1m"
    reset: str = "\x1b[0m"
    bullet: str = "•"

    def dimmed(self, text: str) -> str:
        return f"{self.dim}{text}{self.reset}"

    def emphasized(self, text: str) -> str:
        return f"{self.bold}{text}{self.reset}"
