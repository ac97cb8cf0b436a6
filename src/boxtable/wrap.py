"""Cell wrapping: split cell text into display lines bounded by a column width.

Cells are broken at the most meaningful boundary available: comma separated
lists first, then path-like or dotted text at ``/``, then plain words. A word
that is wider than the column on its own is hard-cut. Any escape sequences
wrapping the whole cell are peeled off first and re-applied to every line.
"""

from __future__ import annotations

from boxtable.utils import chunk_to_width, split_ansi_wrapper, visible_width


def wrap_cell(text: str, width: int) -> list[str]:
    """Wrap *text* into lines no wider than *width* visible columns.

    Always returns at least one line.
    """
    prefix, suffix, core = split_ansi_wrapper(text)

    if visible_width(core) <= width:
        return [prefix + core + suffix]

    if "," in core:
        parts = split_comma_list(core, width)
    elif "/" in core or "." in core:
        parts = split_path(core, width)
    else:
        parts = split_words(core, width)

    if not parts:
        parts = [""]
    return [prefix + part + suffix for part in parts]


def split_comma_list(content: str, width: int) -> list[str]:
    """Break a comma separated list between items, keeping lines under *width*.

    Items are trimmed and re-joined with ``", "``; a line that starts a new
    row drops the separator. Items too wide for a line are word wrapped.
    """
    result: list[str] = []
    line = ""
    for i, item in enumerate(content.split(",")):
        part = item.strip()
        if i > 0:
            part = ", " + part
        if line and visible_width(line + part) > width:
            result.extend(_fit(line, width))
            line = part[2:]
        else:
            line += part
    if line:
        result.extend(_fit(line, width))
    return result


def split_path(content: str, width: int) -> list[str]:
    """Break path-like text at ``/`` boundaries, keeping lines under *width*.

    Continuation segments keep their leading ``/``. A line still wider than
    *width* after splitting (a long dotted name, a sentence) is word wrapped.
    """
    result: list[str] = []
    line = ""
    for i, segment in enumerate(content.split("/")):
        part = "/" + segment if i > 0 else segment
        if line and visible_width(line + part) > width:
            result.append(line)
            line = part
        else:
            line += part
        if visible_width(line) > width:
            result.extend(split_words(line, width))
            line = ""
    if line:
        result.append(line)
    return result


def split_words(content: str, width: int) -> list[str]:
    """Greedily pack space separated words into lines of at most *width*.

    A word wider than *width* is cut into *width*-sized chunks; its last
    chunk stays open so following words can join it.
    """
    result: list[str] = []
    line = ""
    for word in content.split():
        candidate = line + " " + word if line else word
        if visible_width(candidate) <= width:
            line = candidate
        else:
            if line:
                result.append(line)
            line = word
        if visible_width(line) > width:
            chunks = chunk_to_width(line, width)
            result.extend(chunks[:-1])
            line = chunks[-1]
    if line:
        result.append(line)
    return result


def _fit(line: str, width: int) -> list[str]:
    if visible_width(line) <= width:
        return [line]
    return split_words(line, width)


def wrap_bullet(text: str, width: int) -> list[str]:
    """Word-wrap one description bullet, keeping its escape styling.

    Both the wrapper around the whole bullet and the wrapper around each
    individual word are carried onto every line the word ends up on.
    """
    if visible_width(text) <= width:
        return [text]

    prefix, suffix, core = split_ansi_wrapper(text)
    words = core.split()
    if not words or width < 1:
        return [text]

    result: list[str] = []
    line = ""
    line_width = 0

    for word in words:
        word_prefix, word_suffix, word_core = split_ansi_wrapper(word)
        word_width = visible_width(word_core)
        needed = line_width + 1 + word_width if line else word_width

        if needed <= width:
            line = line + " " + word if line else word
            line_width = needed
            continue

        if line:
            result.append(prefix + line + suffix)

        if word_width > width:
            for chunk in chunk_to_width(word_core, width):
                result.append(prefix + word_prefix + chunk + word_suffix + suffix)
            line = ""
            line_width = 0
        else:
            line = word
            line_width = word_width

    if line:
        result.append(prefix + line + suffix)

    return result
