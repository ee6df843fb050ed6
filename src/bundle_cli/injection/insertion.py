"""Indentation aware insertion of text relative to a marker."""

from enum import IntEnum
from typing import Optional, Tuple

INDENT_CHARS = (' ', '\t')


class InsertionMode(IntEnum):
    """Where a value is placed relative to the marker.

    The value doubles as the direction in which line boundaries are walked.
    """
    BEFORE = -1
    REPLACE = 0
    AFTER = 1


def _line_start(text: str, pos: int) -> int:
    return text.rfind('\n', 0, pos) + 1


def _line_end(text: str, pos: int) -> int:
    end = text.find('\n', pos)
    return len(text) if end == -1 else end


def _adjacent_line(text: str, boundary: int, step: int) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` of the line next to ``boundary`` in direction ``step``.

    ``boundary`` is a line start when walking backward and a line end when
    walking forward. Returns None at the edge of the text.
    """
    if step < 0:
        if boundary <= 0:
            return None
        end = boundary - 1
        return _line_start(text, end), end
    if boundary >= len(text):
        return None
    start = boundary + 1
    return start, _line_end(text, start)


def _nearest_content_line(text: str, boundary: int, step: int) -> Optional[int]:
    """Skip blank lines from ``boundary`` and return the start of the first non-blank one."""
    while True:
        line = _adjacent_line(text, boundary, step)
        if line is None:
            return None
        start, end = line
        if text[start:end].strip():
            return start
        boundary = start if step < 0 else end


def _newline(text: str, pos: int) -> str:
    """Line ending used by the line at ``pos``, or by the line before it when it has none."""
    end = _line_end(text, pos)
    if end < len(text):
        return '\r\n' if end > 0 and text[end - 1] == '\r' else '\n'
    start = _line_start(text, pos)
    return '\r\n' if start >= 2 and text[start - 2] == '\r' else '\n'


def _indentation(text: str, line_start: int) -> str:
    end = line_start
    while end < len(text) and text[end] in INDENT_CHARS:
        end += 1
    return text[line_start:end]


def string_insertion(text: str, find: str, value: str, mode: InsertionMode) -> str:
    """Insert ``value`` into ``text`` relative to the first occurrence of ``find``.

    With ``REPLACE`` the marker is substituted textually. With ``BEFORE`` and
    ``AFTER``, a marker that opens (or closes) its line gets the value on a
    line of its own, indented like the nearest non-blank line in that
    direction; blank lines in between are skipped. A marker with other
    content on the same side of its line gets the value inline.

    Args:
        text: The text to insert the value into.
        find: Marker to search for.
        value: Value to insert.
        mode: Insertion mode.

    Returns:
        str: The modified text, or ``text`` itself when ``find`` is absent.
    """
    idx = text.find(find)
    if idx == -1:
        return text

    if mode == InsertionMode.REPLACE:
        return text[:idx] + value + text[idx + len(find):]

    if mode == InsertionMode.AFTER:
        edge = idx + len(find)
        boundary = _line_end(text, edge)
        rest_of_line = text[edge:boundary]
    else:
        edge = idx
        boundary = _line_start(text, idx)
        rest_of_line = text[boundary:edge]

    if rest_of_line.strip():
        return text[:edge] + value + text[edge:]

    anchor = _nearest_content_line(text, boundary, int(mode))
    if anchor is None:
        anchor = _line_start(text, idx)
    indent = _indentation(text, anchor)
    newline = _newline(text, idx)

    if mode == InsertionMode.AFTER:
        if boundary < len(text) and text[boundary - 1] == '\r':
            boundary -= 1
        return text[:boundary] + newline + indent + value + text[boundary:]
    return text[:boundary] + indent + value + newline + text[boundary:]
