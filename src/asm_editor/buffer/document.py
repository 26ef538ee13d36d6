"""Single source of truth for an open assembly document."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from asm_editor.config import EditorConfig
from asm_editor.runtime import telemetry
from asm_editor.text import (
    CursorState,
    TextEditResult,
    accept_completion,
    duplicate_line,
    ensure_cursor,
    insert_at_with_cursor,
    insert_line_break,
)

from .bus import DocumentBus
from .undo import UndoEntry, UndoTimeline


@dataclass(frozen=True, slots=True)
class DocumentView:
    version: int
    text: str
    cursor: CursorState


@dataclass(frozen=True, slots=True)
class DocumentDelta:
    version: int
    text: str
    cursor: CursorState
    label: str


class EditorDocument:
    """Holds text + cursor and applies text-core edits to them.

    Each edit is recorded in the undo timeline and announced on the bus as
    ``document.changed`` with a ``DocumentDelta``. Not thread-safe.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "untitled",
        config: Optional[EditorConfig] = None,
        bus: Optional[DocumentBus] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.config = config or EditorConfig()
        self.bus = bus or DocumentBus()
        self.undo_timeline = undo or UndoTimeline()
        self._text = text
        self._cursor = CursorState()
        self._version = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> CursorState:
        return self._cursor

    @property
    def version(self) -> int:
        return self._version

    def snapshot(self) -> DocumentView:
        return DocumentView(version=self._version, text=self._text, cursor=self._cursor)

    def set_cursor(self, caret_offset: int, selection_length: int = 0) -> CursorState:
        self._cursor = ensure_cursor(
            self._text, CursorState(caret_offset, selection_length)
        )
        self.bus.emit("document.cursor", self._cursor)
        return self._cursor

    def insert(self, text: str, *, position: Optional[int] = None) -> DocumentDelta:
        at = self._cursor.caret_offset if position is None else position
        with EditTransaction(self, "insert") as tx:
            tx.apply(insert_at_with_cursor(self._text, at, text))
        return tx.delta

    def accept_completion(self, word: str) -> DocumentDelta:
        with EditTransaction(self, "accept_completion") as tx:
            tx.apply(accept_completion(self._text, self._cursor.caret_offset, word))
        return tx.delta

    def line_break(self) -> DocumentDelta:
        with EditTransaction(self, "line_break") as tx:
            tx.apply(
                insert_line_break(
                    self._text,
                    self._cursor.caret_offset,
                    section_markers=self.config.section_markers,
                    indent=self.config.indent,
                )
            )
        return tx.delta

    def duplicate_line(self) -> DocumentDelta:
        with EditTransaction(self, "duplicate_line") as tx:
            tx.apply(duplicate_line(self._text, self._cursor.caret_offset))
        return tx.delta

    def replace_text(self, text: str) -> DocumentDelta:
        """Swap the whole content, e.g. after loading a file."""

        caret = min(self._cursor.caret_offset, len(text))
        with EditTransaction(self, "replace_text") as tx:
            tx.apply(TextEditResult(text=text, cursor=CursorState(caret)))
        return tx.delta

    def undo(self) -> Optional[DocumentView]:
        entry = self.undo_timeline.undo()
        if entry is None:
            return None
        self._restore(entry.before_text, entry.cursor_before)
        view = self.snapshot()
        self.bus.emit("document.undo", view)
        return view

    def redo(self) -> Optional[DocumentView]:
        entry = self.undo_timeline.redo()
        if entry is None:
            return None
        self._restore(entry.after_text, entry.cursor_after)
        view = self.snapshot()
        self.bus.emit("document.redo", view)
        return view

    def _restore(self, text: str, cursor: CursorState) -> None:
        self._text = text
        self._cursor = cursor
        self._version += 1


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Wraps one edit in a telemetry span and commits it to undo history."""

    def __init__(self, document: EditorDocument, label: str) -> None:
        self.document = document
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._delta: Optional[DocumentDelta] = None

    @property
    def delta(self) -> DocumentDelta:
        if self._delta is None:
            raise RuntimeError(f"Transaction '{self.label}' was not applied")
        return self._delta

    def __enter__(self) -> "EditTransaction":
        self._span_cm = telemetry.span(
            f"document::{self.label}",
            component="document",
            metadata={"document": self.document.name},
        )
        self._span_cm.__enter__()
        return self

    def apply(self, result: TextEditResult) -> None:
        document = self.document
        entry = UndoEntry(
            label=self.label,
            before_text=document._text,
            after_text=result.text,
            cursor_before=document._cursor,
            cursor_after=result.cursor,
        )
        document._text = result.text
        document._cursor = result.cursor
        document._version += 1
        document.undo_timeline.push(entry)
        self._delta = DocumentDelta(
            version=document._version,
            text=result.text,
            cursor=result.cursor,
            label=self.label,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        if exc_type is None and self._delta is not None:
            self.document.bus.emit("document.changed", self._delta)
        return False
