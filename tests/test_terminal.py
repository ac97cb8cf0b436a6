"""Tests for boxtable.terminal -- width and styling detection."""

from __future__ import annotations

import io
import os
import sys

import pytest

from boxtable.terminal import DEFAULT_COLUMNS, ProcessTerminal


class FakeTTY(io.StringIO):
    """StringIO that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 1


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


class TestColumns:
    """Console width with an 80-column floor."""

    def test_stream_without_fileno_falls_back(self) -> None:
        assert ProcessTerminal(io.StringIO()).columns == DEFAULT_COLUMNS

    def test_closed_stream_falls_back(self) -> None:
        stream = io.StringIO()
        stream.close()
        assert ProcessTerminal(stream).columns == DEFAULT_COLUMNS

    def test_narrow_terminal_raised_to_floor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((40, 24)))
        assert ProcessTerminal(FakeTTY()).columns == 80

    def test_wide_terminal_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((120, 40)))
        assert ProcessTerminal(FakeTTY()).columns == 120

    def test_size_query_failure_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(fd: int) -> os.terminal_size:
            raise OSError("not a terminal")

        monkeypatch.setattr(os, "get_terminal_size", fail)
        assert ProcessTerminal(FakeTTY()).columns == DEFAULT_COLUMNS


class TestIsTTY:
    """Styling support from the stream and the environment."""

    def test_plain_stream(self) -> None:
        assert ProcessTerminal(io.StringIO()).is_tty is False

    def test_interactive_stream(self) -> None:
        assert ProcessTerminal(FakeTTY()).is_tty is True

    def test_closed_stream(self) -> None:
        stream = io.StringIO()
        stream.close()
        assert ProcessTerminal(stream).is_tty is False

    def test_no_color_disables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert ProcessTerminal(FakeTTY()).is_tty is False

    def test_force_color_enables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert ProcessTerminal(io.StringIO()).is_tty is True

    def test_no_color_beats_force_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert ProcessTerminal(FakeTTY()).is_tty is False

    def test_defaults_to_stdout(self) -> None:
        assert ProcessTerminal().stream is sys.stdout
