from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

import pytest

from asm_editor.completion import SuggestionSource
from asm_editor.config import EditorConfig, SuggestionRule
from asm_editor.runtime import telemetry

SOURCE = (
    "section .data\n"
    "  msg db 'hi', 0\n"
    "  count dd 3\n"
    "section .text\n"
    "start:\n"
    "  mov eax, msg\n"
    "loop:\n"
    "  jmp lo"
)


def test_collect_labels_then_rule_identifiers() -> None:
    source = SuggestionSource()

    assert source.collect(SOURCE) == [
        "start",
        "loop",
        "[start]",
        "[loop]",
        "msg",
        "count",
        "[msg]",
        "[count]",
    ]


def test_suggest_filters_by_word_at_caret() -> None:
    source = SuggestionSource()

    assert source.suggest(SOURCE, len(SOURCE)) == ["loop"]


def test_suggest_empty_word_returns_everything() -> None:
    source = SuggestionSource()
    buffer = SOURCE + " "

    assert source.suggest(buffer, len(buffer)) == source.collect(buffer)


def test_suggest_excludes_exact_word() -> None:
    buffer = "start:\n  jmp start"

    assert SuggestionSource().suggest(buffer, len(buffer)) == []


def test_suggest_bracketed_form() -> None:
    buffer = "x:\n mov eax, [x"

    assert SuggestionSource().suggest(buffer, len(buffer)) == ["[x]"]


def test_suggest_deduplicates() -> None:
    buffer = "\n a db 1\n a db 2\n "

    assert SuggestionSource().suggest(buffer, len(buffer)) == ["a", "[a]"]


def test_custom_rules() -> None:
    config = EditorConfig(suggestion_rules=(SuggestionRule("byte", "\\.byte"),))
    source = SuggestionSource(config)

    assert source.collect("\n table .byte 1, 2\n") == ["table", "[table]"]


def test_describe_rule() -> None:
    source = SuggestionSource()

    assert source.describe(SuggestionRule("data", "db|dw")) == '"db" | "dw"'


def test_typed_word_stops_at_caret() -> None:
    source = SuggestionSource()
    buffer = "loop:\n  jmp lo"

    assert source.typed_word(buffer, len(buffer)) == "lo"
    assert source.typed_word(buffer, len(buffer) - 1) == "l"
    assert source.typed_word(buffer, len("loop:\n  jmp ")) == ""


def test_suggest_with_caret_inside_word() -> None:
    buffer = "loop:\n  jmp lo"

    assert SuggestionSource().suggest(buffer, len(buffer) - 1) == ["loop"]


def test_suggest_span_uses_completion_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    names: List[Optional[str]] = []
    real_span = telemetry.span

    @contextmanager
    def recording_span(name: str, **kwargs: Any) -> Iterator[telemetry.SpanHandle]:
        names.append(kwargs.get("logger_name"))
        with real_span(name, **kwargs) as handle:
            yield handle

    monkeypatch.setattr(telemetry, "span", recording_span)

    SuggestionSource().suggest(SOURCE, len(SOURCE))

    assert names == ["asm_editor.completion"]
