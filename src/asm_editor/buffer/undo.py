"""Linear undo/redo history for document edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from asm_editor.text import CursorState


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before_text: str
    after_text: str
    cursor_before: CursorState
    cursor_after: CursorState


class UndoTimeline:
    """Undo stack with a moving index; a new push drops any redo tail."""

    def __init__(self, *, limit: int = 500) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(entry)
        if len(self._entries) > self.limit:
            del self._entries[0]
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
