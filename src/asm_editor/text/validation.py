"""Precondition checks shared by the text operations."""

from __future__ import annotations

from .state import CursorState


class TextValidationError(RuntimeError):
    """Raised when a caller passes an offset or cursor outside the buffer."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def ensure_offset(buffer: str, offset: int) -> int:
    if offset < 0 or offset > len(buffer):
        raise TextValidationError(
            f"Offset {offset} outside buffer of length {len(buffer)}", offset=offset
        )
    return offset


def ensure_cursor(buffer: str, cursor: CursorState) -> CursorState:
    ensure_offset(buffer, cursor.caret_offset)
    if cursor.selection_length < 0:
        raise TextValidationError(
            "Selection length cannot be negative", offset=cursor.caret_offset
        )
    if cursor.selection_end > len(buffer):
        raise TextValidationError(
            "Selection extends past end of buffer", offset=cursor.selection_end
        )
    return cursor
