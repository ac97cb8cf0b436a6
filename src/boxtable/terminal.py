"""Terminal abstraction for the two facts a table needs about its output.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that reports the width of ``sys.stdout`` and whether escape
sequences should be emitted to it.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

# Width used when the size query fails or reports something narrower
DEFAULT_COLUMNS = 80


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal a table is rendered for."""

    @property
    def columns(self) -> int: ...

    @property
    def is_tty(self) -> bool: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by an output stream, ``sys.stdout`` by default.

    ``NO_COLOR`` (any value) turns styling off and ``FORCE_COLOR`` turns it
    on for non-terminal streams; ``NO_COLOR`` wins when both are set.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def columns(self) -> int:
        try:
            width = os.get_terminal_size(self.stream.fileno()).columns
        except (ValueError, OSError, AttributeError):
            return DEFAULT_COLUMNS
        return max(width, DEFAULT_COLUMNS)

    @property
    def is_tty(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        if os.environ.get("FORCE_COLOR") is not None:
            return True
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            # Closed stream
            return False
