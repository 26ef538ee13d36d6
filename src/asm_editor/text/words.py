"""Word lookup and partial-word replacement around the caret."""

from __future__ import annotations

import re

from .state import CursorState, TextEditResult
from .validation import ensure_offset

_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)
_IDENTIFIER_TAIL = re.compile(r"\w*", re.ASCII)


def last_word(text: str) -> str:
    """Return the final whitespace-delimited token of ``text``.

    Trailing whitespace (or empty input) yields ``""``.
    """

    return _WHITESPACE_RUN.split(text)[-1]


def extract_surrounding_word(buffer: str, caret_offset: int) -> str:
    """Return the run of non-whitespace characters touching ``caret_offset``."""

    ensure_offset(buffer, caret_offset)
    start = caret_offset
    end = caret_offset
    while start > 0 and not buffer[start - 1].isspace():
        start -= 1
    while end < len(buffer) and not buffer[end].isspace():
        end += 1
    return buffer[start:end]


def _splice_point(prefix: str) -> int:
    # Last substring occurrence of the trailing token, not a token boundary.
    return prefix.rfind(last_word(prefix))


def insert_at_cursor_replacing_partial_word(
    buffer: str, caret_offset: int, new_text: str
) -> str:
    """Replace the word being typed before the caret with ``new_text``.

    Everything from the caret onwards is kept. When the text before the
    caret is empty or ends in whitespace there is nothing to replace and
    ``new_text`` is simply inserted at the caret.
    """

    ensure_offset(buffer, caret_offset)
    prefix = buffer[:caret_offset]
    return prefix[: _splice_point(prefix)] + new_text + buffer[caret_offset:]


def accept_completion(buffer: str, caret_offset: int, new_text: str) -> TextEditResult:
    """Replace the word being completed with ``new_text`` and put the caret
    after it.

    Unlike ``insert_at_cursor_replacing_partial_word`` the identifier
    characters right of the caret are replaced too, so completing with the
    caret in the middle of a word does not leave its tail behind.
    """

    ensure_offset(buffer, caret_offset)
    prefix = buffer[:caret_offset]
    head = prefix[: _splice_point(prefix)]
    tail = _IDENTIFIER_TAIL.match(buffer, caret_offset).end()
    return TextEditResult(
        text=head + new_text + buffer[tail:],
        cursor=CursorState(len(head) + len(new_text)),
    )
