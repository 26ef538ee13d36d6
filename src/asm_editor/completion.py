"""Autocomplete suggestions drawn from labels and declared identifiers."""

from __future__ import annotations

from typing import List, Optional

from asm_editor.config import EditorConfig, SuggestionRule
from asm_editor.runtime import telemetry
from asm_editor.text import (
    ensure_offset,
    extract_declared_identifiers,
    extract_label_names,
    format_alternatives,
    last_word,
)

LOGGER_NAME = "asm_editor.completion"


class SuggestionSource:
    """Collects symbol names from a source text and filters them by prefix."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()

    @property
    def rules(self) -> tuple[SuggestionRule, ...]:
        return self.config.suggestion_rules

    def collect(self, source: str) -> List[str]:
        """Labels first, then identifiers for each rule in rule order."""

        symbols = extract_label_names(source)
        for rule in self.rules:
            symbols.extend(extract_declared_identifiers(source, rule.pattern))
        return symbols

    def typed_word(self, buffer: str, caret_offset: int) -> str:
        """The partial word left of the caret, i.e. what a completion replaces."""

        ensure_offset(buffer, caret_offset)
        return last_word(buffer[:caret_offset])

    def suggest(self, buffer: str, caret_offset: int) -> List[str]:
        """Unique collected symbols that extend the word typed before the caret."""

        word = self.typed_word(buffer, caret_offset)
        with telemetry.span(
            "completion::suggest",
            logger_name=LOGGER_NAME,
            component="completion",
            metadata={"word": word, "rules": len(self.rules)},
        ) as handle:
            seen: dict[str, None] = {}
            for symbol in self.collect(buffer):
                if symbol == word or not symbol.startswith(word):
                    continue
                seen.setdefault(symbol, None)
            handle.add_metadata("matches", len(seen))
        return list(seen)

    def describe(self, rule: SuggestionRule) -> str:
        return format_alternatives(rule.alternatives)


__all__ = ["SuggestionSource"]
