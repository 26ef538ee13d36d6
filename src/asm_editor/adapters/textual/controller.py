"""Adapter that turns Textual-style key events into document edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from asm_editor.buffer import DocumentView, EditorDocument
from asm_editor.completion import SuggestionSource
from asm_editor.runtime import telemetry

LOGGER_NAME = "asm_editor.adapters.textual"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the host uses to refresh its widgets."""

    update_buffer: Callable[[DocumentView], None]
    update_suggestions: Callable[[List[str]], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Routes key names (``"enter"``, ``"tab"``, ``"ctrl+d"``...) to an
    ``EditorDocument`` and pushes the resulting state back through hooks."""

    def __init__(
        self,
        document: EditorDocument,
        hooks: TextualUIHooks,
        *,
        suggestions: Optional[SuggestionSource] = None,
    ) -> None:
        self.document = document
        self.hooks = hooks
        self.suggestions = suggestions or SuggestionSource(document.config)
        self._handlers: Dict[str, Callable[[], str]] = {
            "enter": self._line_break,
            "tab": self._tab,
            "ctrl+d": self._duplicate_line,
            "ctrl+z": self._undo,
            "ctrl+y": self._redo,
        }
        self._refresh()

    def handle_key(self, key: str, *, text: Optional[str] = None) -> str:
        """Apply the edit bound to ``key`` (or insert ``text``) and return a
        status label."""

        self._log("key ->", key=key, text=text)
        handler = self._handlers.get(key.lower())
        if handler is not None:
            status = handler()
        elif text:
            self.document.insert(text)
            status = "insert"
        else:
            status = "ignored"
        self.hooks.update_status(status)
        self._refresh()
        self._log("result <-", status=status)
        return status

    def current_suggestions(self) -> List[str]:
        return self.suggestions.suggest(
            self.document.text, self.document.cursor.caret_offset
        )

    def _line_break(self) -> str:
        self.document.line_break()
        return "line_break"

    def _tab(self) -> str:
        caret = self.document.cursor.caret_offset
        typed = self.suggestions.typed_word(self.document.text, caret)
        options = self.current_suggestions() if typed else []
        if options:
            self.document.accept_completion(options[0])
            telemetry.record_event(
                "completion.accept",
                data={"document": self.document.name, "symbol": options[0]},
                logger_name=LOGGER_NAME,
            )
            return "completion"
        self.document.insert(self.document.config.indent)
        return "indent"

    def _duplicate_line(self) -> str:
        self.document.duplicate_line()
        return "duplicate_line"

    def _undo(self) -> str:
        return "undo" if self.document.undo() is not None else "ignored"

    def _redo(self) -> str:
        return "redo" if self.document.redo() is not None else "ignored"

    def _refresh(self) -> None:
        self.hooks.update_buffer(self.document.snapshot())
        self.hooks.update_suggestions(self.current_suggestions())

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "document": self.document.name,
            "version": self.document.version,
            "caret": self.document.cursor.caret_offset,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix] + [f"{key}={value!r}" for key, value in snapshot.items()])
        self.hooks.log(line)


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
