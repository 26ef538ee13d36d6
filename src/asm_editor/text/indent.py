"""Auto-indent applied when the user breaks a line."""

from __future__ import annotations

import re
from typing import Iterable

from .insertion import insert_at_with_cursor
from .state import TextEditResult
from .validation import ensure_offset
from .words import last_word

SECTION_MARKERS: tuple[str, ...] = (".data", ".bss", ".text")
INDENT = "   "

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def _is_blank(text: str) -> bool:
    return not text.strip()


def compute_line_break_insertion(
    buffer: str,
    caret_offset: int,
    *,
    section_markers: Iterable[str] = SECTION_MARKERS,
    indent: str = INDENT,
) -> str:
    """Return the text to insert for a line break at ``caret_offset``.

    The new line is indented by one ``indent`` unit when the text before the
    caret ends in a label colon, when the current line is already indented
    body text, or when the last word typed is a section marker. Only a
    single indent level exists.
    """

    ensure_offset(buffer, caret_offset)
    prefix = buffer[:caret_offset]
    current_line = _LINE_BREAK.split(prefix)[-1]

    after_label = not _is_blank(buffer) and not _is_blank(prefix) and prefix[-1] == ":"
    in_body = indent in current_line and current_line != indent
    after_section = last_word(prefix) in tuple(section_markers)

    if after_label or in_body or after_section:
        return "\n" + indent
    return "\n"


def insert_line_break(
    buffer: str,
    caret_offset: int,
    *,
    section_markers: Iterable[str] = SECTION_MARKERS,
    indent: str = INDENT,
) -> TextEditResult:
    """Insert an auto-indented line break and move the caret past it."""

    inserted = compute_line_break_insertion(
        buffer, caret_offset, section_markers=section_markers, indent=indent
    )
    return insert_at_with_cursor(buffer, caret_offset, inserted)
