from __future__ import annotations

import pytest

from asm_editor.text import (
    CursorState,
    TextValidationError,
    duplicate_line,
    ensure_cursor,
    insert_at,
    insert_at_with_cursor,
    line_bounds,
)


@pytest.mark.parametrize("position", range(0, 12))
def test_insert_empty_text_is_noop(position: int) -> None:
    buffer = "mov eax, 1\n"
    assert insert_at(buffer, position, "") == buffer


@pytest.mark.parametrize("position", [0, 3, 7])
def test_insert_grows_by_inserted_length(position: int) -> None:
    buffer = "section"
    assert len(insert_at(buffer, position, "xyz")) == len(buffer) + 3


def test_insert_at_splices_text() -> None:
    assert insert_at("movax", 3, " e") == "mov eax"


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_at_fails_fast_out_of_range(position: int) -> None:
    with pytest.raises(TextValidationError):
        insert_at("abc", position, "X")


def test_insert_with_cursor_places_caret_after_text() -> None:
    result = insert_at_with_cursor("abc", 1, "X")

    assert result.text == "aXbc"
    assert result.cursor == CursorState(2, 0)
    assert result.caret_offset == 2


def test_line_bounds() -> None:
    assert line_bounds("abc", 0) == (0, 3)
    assert line_bounds("a\nbc\nd", 3) == (2, 4)
    assert line_bounds("a\n", 2) == (2, 2)


def test_duplicate_line_copies_below() -> None:
    result = duplicate_line("a\nbc\nd", 3)

    assert result.text == "a\nbc\nbc\nd"
    assert result.cursor.caret_offset == 6


def test_duplicate_last_line_without_newline() -> None:
    result = duplicate_line("x = 1", 2)

    assert result.text == "x = 1\nx = 1"
    assert result.cursor.caret_offset == 8


def test_ensure_cursor_checks_selection() -> None:
    assert ensure_cursor("abcd", CursorState(1, 3)) == CursorState(1, 3)
    with pytest.raises(TextValidationError):
        ensure_cursor("abcd", CursorState(2, 3))
    with pytest.raises(TextValidationError):
        ensure_cursor("abcd", CursorState(2, -1))
