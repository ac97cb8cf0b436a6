"""Tests for boxtable.utils -- terminal text utilities."""

from __future__ import annotations

from boxtable.utils import (
    chunk_to_width,
    extract_ansi_code,
    split_ansi_wrapper,
    strip_ansi,
    truncate_to_width,
    visible_width,
)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the visible terminal width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        # Bold "hi" then reset -- only "hi" contributes width.
        assert visible_width("\x1b[1mhi\x1b[0m") == 2

    def test_multiple_ansi_codes(self) -> None:
        assert visible_width("\x1b[1m\x1b[31mabc\x1b[0m") == 3

    def test_interior_codes_do_not_count(self) -> None:
        assert visible_width("a\x1b[38;5;240mb\x1b[0Kc") == 3

    def test_only_escape_sequences(self) -> None:
        assert visible_width("\x1b[1m\x1b[0m") == 0

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert visible_width("A世B") == 4

    def test_combining_mark_adds_nothing(self) -> None:
        assert visible_width("é") == 1

    def test_bullet_is_narrow(self) -> None:
        assert visible_width("• item") == 6


# ---------------------------------------------------------------------------
# strip_ansi / extract_ansi_code
# ---------------------------------------------------------------------------


class TestStripAnsi:
    """Remove CSI sequences, keep everything printable."""

    def test_removes_sgr_codes(self) -> None:
        assert strip_ansi("\x1b[31mred\x1b[0m") == "red"

    def test_removes_non_sgr_csi(self) -> None:
        assert strip_ansi("a\x1b[2Kb") == "ab"

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("plain / text, here") == "plain / text, here"

    def test_empty_string(self) -> None:
        assert strip_ansi("") == ""


class TestExtractAnsiCode:
    """Recognise a CSI sequence at a given position."""

    def test_code_at_position(self) -> None:
        assert extract_ansi_code("x\x1b[1;31my", 1) == ("\x1b[1;31m", 7)

    def test_no_code_at_position(self) -> None:
        assert extract_ansi_code("x\x1b[1my", 0) is None

    def test_position_past_end(self) -> None:
        assert extract_ansi_code("abc", 10) is None


# ---------------------------------------------------------------------------
# split_ansi_wrapper
# ---------------------------------------------------------------------------


class TestSplitAnsiWrapper:
    """Peel leading and trailing escape runs off a string."""

    def test_plain_text(self) -> None:
        assert split_ansi_wrapper("plain") == ("", "", "plain")

    def test_leading_and_trailing_runs(self) -> None:
        prefix, suffix, core = split_ansi_wrapper("\x1b[1m\x1b[31mabc\x1b[0m")
        assert prefix == "\x1b[1m\x1b[31m"
        assert suffix == "\x1b[0m"
        assert core == "abc"

    def test_only_escape_sequences(self) -> None:
        assert split_ansi_wrapper("\x1b[1m\x1b[0m") == ("\x1b[1m\x1b[0m", "", "")

    def test_interior_codes_stay_in_core(self) -> None:
        prefix, suffix, core = split_ansi_wrapper("a\x1b[1mb\x1b[0m")
        assert prefix == ""
        assert suffix == "\x1b[0m"
        assert core == "a\x1b[1mb"

    def test_empty_string(self) -> None:
        assert split_ansi_wrapper("") == ("", "", "")

    def test_reassembles_input(self) -> None:
        text = "\x1b[32mgreen \x1b[4mund\x1b[24m text\x1b[0m\x1b[K"
        prefix, suffix, core = split_ansi_wrapper(text)
        assert prefix + core + suffix == text


# ---------------------------------------------------------------------------
# chunk_to_width
# ---------------------------------------------------------------------------


class TestChunkToWidth:
    """Hard-cut text into fixed-width pieces."""

    def test_exact_chunks_with_short_tail(self) -> None:
        assert chunk_to_width("abcdefghij", 3) == ["abc", "def", "ghi", "j"]

    def test_text_narrower_than_width(self) -> None:
        assert chunk_to_width("ab", 5) == ["ab"]

    def test_empty_text(self) -> None:
        assert chunk_to_width("", 4) == []

    def test_wide_character_moves_to_next_chunk(self) -> None:
        # "a" + two wide chars: the first wide char would straddle width 2.
        assert chunk_to_width("a世世", 2) == ["a", "世", "世"]

    def test_non_positive_width_still_progresses(self) -> None:
        assert chunk_to_width("abc", 0) == ["a", "b", "c"]

    def test_escape_codes_follow_next_character(self) -> None:
        chunks = chunk_to_width("ab\x1b[1mcd", 2)
        assert chunks == ["ab", "\x1b[1mcd"]

    def test_chunks_are_lossless(self) -> None:
        text = "x\x1b[31myz\x1b[0mw" * 3
        assert "".join(chunk_to_width(text, 4)) == text


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


class TestTruncateToWidth:
    """Truncate text to a maximum visible width."""

    def test_short_text_unchanged(self) -> None:
        assert truncate_to_width("hi", 10) == "hi"

    def test_exact_width_unchanged(self) -> None:
        assert truncate_to_width("hello", 5) == "hello"

    def test_truncates_with_ellipsis(self) -> None:
        result = truncate_to_width("hello world", 5)
        assert visible_width(result) <= 5
        assert result.endswith("...")

    def test_truncate_with_single_char_ellipsis(self) -> None:
        assert truncate_to_width("Security advisory", 9, ellipsis="…") == "Security…"

    def test_truncate_zero_width_returns_empty(self) -> None:
        assert truncate_to_width("hello", 0) == ""

    def test_pad_fills_to_max_width(self) -> None:
        result = truncate_to_width("hi", 10, pad=True)
        assert visible_width(result) == 10
        assert result.startswith("hi")

    def test_truncate_with_ansi_preserves_codes(self) -> None:
        result = truncate_to_width("\x1b[31mhello world\x1b[0m", 8)
        assert visible_width(result) <= 8
        assert result.startswith("\x1b[31m")
