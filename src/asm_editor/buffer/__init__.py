"""Stateful document wrapper, event bus and undo history."""

from .bus import DocumentBus
from .document import DocumentDelta, DocumentView, EditorDocument, EditTransaction
from .undo import UndoEntry, UndoTimeline

__all__ = [
    "DocumentBus",
    "DocumentDelta",
    "DocumentView",
    "EditorDocument",
    "EditTransaction",
    "UndoEntry",
    "UndoTimeline",
]
