"""Pattern-based symbol extraction for autocomplete.

There is no assembler front end here. Declarations are found with plain
regular expressions, so names inside comments or string literals that fit
the pattern are returned just like real ones. Word and whitespace classes
are ASCII-only.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern

_LABEL = re.compile(r"(\w+):$", re.ASCII)


class SymbolPatternError(ValueError):
    """Raised when a declaration type pattern is not a valid regex fragment."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid type pattern {pattern!r}: {reason}")
        self.pattern = pattern


def compile_type_pattern(type_pattern: str) -> Pattern[str]:
    """Build the ``<ws> name <ws> type <ws>`` declaration matcher."""

    try:
        return re.compile(rf"\s+(\w+)\s+({type_pattern})\s+", re.ASCII)
    except re.error as exc:
        raise SymbolPatternError(type_pattern, str(exc)) from exc


def with_bracketed(names: Iterable[str]) -> List[str]:
    """Return ``names`` followed by ``[name]`` for each, preserving order."""

    plain = list(names)
    return plain + [f"[{name}]" for name in plain]


def extract_declared_identifiers(source: str, type_pattern: str) -> List[str]:
    """Names declared as ``name <type_pattern>`` anywhere in ``source``.

    Colons are stripped first so ``msg: db "hi"`` and ``msg db "hi"`` match
    alike. Repeated declarations are kept. Identifiers are ASCII word
    characters only.
    """

    matcher = compile_type_pattern(type_pattern)
    stripped = source.replace(":", "")
    return with_bracketed(match.group(1) for match in matcher.finditer(stripped))


def extract_label_names(source: str) -> List[str]:
    """Names of ``label:`` lines, in source order."""

    names: List[str] = []
    for line in source.split("\n"):
        match = _LABEL.search(line.strip())
        if match:
            names.append(match.group(1))
    return with_bracketed(names)
