"""Positional insertion and line duplication."""

from __future__ import annotations

from .state import CursorState, TextEditResult
from .validation import ensure_offset


def insert_at(buffer: str, position: int, new_text: str) -> str:
    """Splice ``new_text`` into ``buffer`` at ``position``.

    ``position`` must lie in ``[0, len(buffer)]``; anything else raises
    ``TextValidationError`` rather than being clamped.
    """

    ensure_offset(buffer, position)
    return buffer[:position] + new_text + buffer[position:]


def insert_at_with_cursor(buffer: str, position: int, text: str) -> TextEditResult:
    """Insert ``text`` and leave the caret right after it, with no selection."""

    return TextEditResult(
        text=insert_at(buffer, position, text),
        cursor=CursorState(position + len(text)),
    )


def line_bounds(buffer: str, caret_offset: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the line holding the caret, newline excluded."""

    ensure_offset(buffer, caret_offset)
    start = buffer.rfind("\n", 0, caret_offset) + 1
    end = buffer.find("\n", caret_offset)
    if end == -1:
        end = len(buffer)
    return start, end


def duplicate_line(buffer: str, caret_offset: int) -> TextEditResult:
    """Copy the caret's line directly below it.

    The caret keeps its column and lands on the copy.
    """

    start, end = line_bounds(buffer, caret_offset)
    copy = "\n" + buffer[start:end]
    return TextEditResult(
        text=insert_at(buffer, end, copy),
        cursor=CursorState(caret_offset + len(copy)),
    )
