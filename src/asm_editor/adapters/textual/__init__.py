"""Textual-flavoured key adapter (no widgets are rendered here)."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
