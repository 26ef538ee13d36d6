from __future__ import annotations

import re

import pytest

from asm_editor.text import (
    SymbolPatternError,
    extract_declared_identifiers,
    extract_label_names,
)


def test_label_names_in_line_order_then_bracketed() -> None:
    source = "start:\n  mov eax, 1\nloop:\n  jmp loop\n"

    assert extract_label_names(source) == ["start", "loop", "[start]", "[loop]"]


def test_label_names_trim_surrounding_whitespace() -> None:
    assert extract_label_names("  main:  \n") == ["main", "[main]"]


def test_label_inside_comment_is_extracted() -> None:
    assert extract_label_names("; jump back to done:\n") == ["done", "[done]"]


def test_label_names_empty_source() -> None:
    assert extract_label_names("") == []


def test_declared_identifiers() -> None:
    source = "section .data\n  msg db 'hi', 0\n  len equ $ - msg\n"

    assert extract_declared_identifiers(source, "db|dw") == ["msg", "[msg]"]


def test_declared_identifiers_ignore_colons() -> None:
    assert extract_declared_identifiers("\nmsg: db 10\n", "db") == ["msg", "[msg]"]


def test_repeated_declarations_are_kept() -> None:
    source = "\n x db 1\n x db 2\n"

    assert extract_declared_identifiers(source, "db") == ["x", "x", "[x]", "[x]"]


def test_declaration_needs_leading_whitespace() -> None:
    assert extract_declared_identifiers("x db 1", "db") == []


def test_declared_identifiers_no_match() -> None:
    assert extract_declared_identifiers("mov eax, 1", "db") == []


def test_malformed_type_pattern_raises() -> None:
    with pytest.raises(SymbolPatternError) as info:
        extract_declared_identifiers("\n x db 1\n", "db|(")

    assert info.value.pattern == "db|("
    assert isinstance(info.value.__cause__, re.error)


def test_label_names_are_ascii_identifiers() -> None:
    assert extract_label_names("café:\nstart:\n") == ["start", "[start]"]
