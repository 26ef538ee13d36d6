"""Cursor and edit-result values passed through the text core."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorState:
    """Caret offset plus the length of the selection that starts there."""

    caret_offset: int = 0
    selection_length: int = 0

    @property
    def selection_end(self) -> int:
        return self.caret_offset + self.selection_length


@dataclass(frozen=True, slots=True)
class TextEditResult:
    """New buffer text and the cursor that goes with it."""

    text: str
    cursor: CursorState

    @property
    def caret_offset(self) -> int:
        return self.cursor.caret_offset
