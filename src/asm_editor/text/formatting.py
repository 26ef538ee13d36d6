"""Small string helpers used when displaying paths and rules."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def delete_white_spaces(text: str) -> str:
    return text.replace(" ", "")


def replace_home_path(text: str, home: str | None = None) -> str:
    """Abbreviate the user's home directory to ``~``."""

    home_dir = home if home is not None else str(Path.home())
    if not home_dir:
        return text
    return text.replace(home_dir, "~")


def format_alternatives(words: Iterable[object]) -> str:
    """Render ``["a", "b"]`` as ``"a" | "b"``."""

    return " | ".join(f'"{word}"' for word in words)
