"""Terminal text utilities: ANSI handling, width measurement, column slicing.

Provides functions for measuring the visible terminal width of styled text,
peeling leading/trailing escape wrappers off a cell, and cutting text into
fixed-width chunks without splitting escape sequences.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for CSI sequences
# ---------------------------------------------------------------------------

# CSI sequences: ESC[ <digits / ;> <one letter>
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
# Same pattern with a capture group so re.split keeps the sequences
_ANSI_SPLIT_RE = re.compile(r"(\x1b\[[0-9;]*[A-Za-z])")

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    codepoints = list(g)

    for ch in codepoints:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(codepoints[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(codepoints[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(codepoints[0]), 0)


# ---------------------------------------------------------------------------
# strip_ansi / visible_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove every CSI escape sequence from *text*."""
    if not text:
        return text
    return _ANSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Ignores CSI escape sequences wherever they appear.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = _ANSI_RE.sub("", text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# extract_ansi_code / split_ansi_wrapper
# ---------------------------------------------------------------------------

def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract a CSI escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` where *code* is the full escape sequence string
    and *length* is the number of characters consumed, or ``None`` if there is
    no escape sequence at *pos*.
    """
    match = _ANSI_RE.match(text, pos)
    if match is None:
        return None
    code = match.group(0)
    return (code, len(code))


def split_ansi_wrapper(text: str) -> tuple[str, str, str]:
    """Split *text* into ``(prefix, suffix, core)``.

    *prefix* is the contiguous run of escape sequences anchored at the start,
    *suffix* the run anchored at the end, and *core* whatever lies between.
    Escape sequences inside *core* are left in place. When *text* consists
    only of escape sequences everything lands in *prefix* and *core* is empty.
    """
    start = 0
    while True:
        extracted = extract_ansi_code(text, start)
        if extracted is None:
            break
        start += extracted[1]

    prefix = text[:start]
    if start >= len(text):
        return (prefix, "", "")

    end = len(text)
    while end > start:
        last = None
        for match in _ANSI_RE.finditer(text, start, end):
            last = match
        if last is None or last.end() != end:
            break
        end = last.start()

    return (prefix, text[end:], text[start:end])


# ---------------------------------------------------------------------------
# Column slicing
# ---------------------------------------------------------------------------

def _tokens(text: str) -> list[tuple[str, int]]:
    """Break *text* into escape sequences (width 0) and grapheme clusters."""
    result: list[tuple[str, int]] = []
    for piece in _ANSI_SPLIT_RE.split(text):
        if not piece:
            continue
        if _ANSI_RE.fullmatch(piece):
            result.append((piece, 0))
            continue
        for g in grapheme.graphemes(piece):
            result.append((g, _grapheme_width(g)))
    return result


def chunk_to_width(text: str, width: int) -> list[str]:
    """Cut *text* into consecutive pieces of *width* visible columns.

    Every piece but the last is exactly *width* columns wide unless a wide
    grapheme straddles the boundary, in which case it moves to the next
    piece. A piece always holds at least one visible grapheme, so the cut
    makes progress even when *width* is narrower than a single character.
    Escape sequences stay attached to the grapheme that follows them.
    """
    if not text:
        return []
    width = max(width, 1)

    chunks: list[str] = []
    current: list[str] = []
    pending: list[str] = []
    cols = 0

    for token, w in _tokens(text):
        if not w:
            pending.append(token)
            continue
        if cols and cols + w > width:
            chunks.append("".join(current))
            current = []
            cols = 0
        current.extend(pending)
        pending = []
        current.append(token)
        cols += w

    current.extend(pending)
    if current:
        chunks.append("".join(current))
    return chunks


def _take_columns(text: str, max_cols: int) -> str:
    """Return a prefix of *text* that fits within *max_cols* visible columns.

    Escape sequences are preserved; the text is cut at grapheme boundaries.
    """
    result: list[str] = []
    cols = 0
    for token, w in _tokens(text):
        if cols + w > max_cols:
            break
        result.append(token)
        cols += w
    return "".join(result)


def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = "...",
    pad: bool = False,
) -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    If the text is wider than *max_width*, it is truncated and *ellipsis* is
    appended (the ellipsis counts towards the width).  If *pad* is ``True``,
    the result is right-padded with spaces to exactly *max_width*.
    """
    if max_width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= max_width:
        if pad:
            return text + " " * (max_width - text_width)
        return text

    ellipsis_width = visible_width(ellipsis)
    target_width = max_width - ellipsis_width
    if target_width <= 0:
        return _take_columns(ellipsis, max_width)

    result = _take_columns(text, target_width) + ellipsis

    if pad:
        result_width = visible_width(result)
        if result_width < max_width:
            result += " " * (max_width - result_width)

    return result
