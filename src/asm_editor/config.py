"""Editor configuration: section markers, indent unit and suggestion rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from asm_editor.runtime.telemetry import env_value
from asm_editor.text import SECTION_MARKERS, compile_type_pattern


@dataclass(frozen=True, slots=True)
class SuggestionRule:
    """Named regex fragment matching the type token of a declaration."""

    name: str
    pattern: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("rule name cannot be empty")
        if not self.pattern:
            raise ValueError(f"rule '{self.name}' has an empty pattern")
        compile_type_pattern(self.pattern)

    @property
    def alternatives(self) -> tuple[str, ...]:
        return tuple(part for part in self.pattern.split("|") if part)


DEFAULT_SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule("data", "db|dw|dd|dq|dt"),
    SuggestionRule("reserve", "resb|resw|resd|resq|rest"),
    SuggestionRule("equate", "equ"),
)


@dataclass(frozen=True, slots=True)
class EditorConfig:
    section_markers: Tuple[str, ...] = SECTION_MARKERS
    indent_width: int = 3
    suggestion_rules: Tuple[SuggestionRule, ...] = DEFAULT_SUGGESTION_RULES

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ValueError("indent_width must be positive")
        if isinstance(self.section_markers, str):
            raise TypeError("section_markers must be a sequence of strings, not a str")
        object.__setattr__(self, "section_markers", tuple(self.section_markers))
        object.__setattr__(self, "suggestion_rules", tuple(self.suggestion_rules))

    @property
    def indent(self) -> str:
        return " " * self.indent_width

    def with_overrides(self, **changes: object) -> "EditorConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config, honouring ``ASM_EDITOR_SECTION_MARKERS`` (comma
        separated) and ``ASM_EDITOR_INDENT_WIDTH``."""

        config = cls()
        markers = env_value("SECTION_MARKERS")
        if markers is not None:
            parsed = tuple(item.strip() for item in markers.split(",") if item.strip())
            if not parsed:
                raise ValueError("ASM_EDITOR_SECTION_MARKERS is empty")
            config = config.with_overrides(section_markers=parsed)
        width = env_value("INDENT_WIDTH")
        if width is not None:
            try:
                indent_width = int(width)
            except ValueError as exc:
                raise ValueError(
                    f"ASM_EDITOR_INDENT_WIDTH must be an integer, got {width!r}"
                ) from exc
            config = config.with_overrides(indent_width=indent_width)
        return config


__all__ = ["EditorConfig", "SuggestionRule", "DEFAULT_SUGGESTION_RULES"]
