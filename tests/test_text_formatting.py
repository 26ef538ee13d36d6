from __future__ import annotations

from pathlib import Path

import pytest

from asm_editor.text import delete_white_spaces, format_alternatives, replace_home_path
from asm_editor.text import formatting


def test_delete_white_spaces() -> None:
    assert delete_white_spaces("a b  c") == "abc"


def test_replace_home_path_explicit_home() -> None:
    assert replace_home_path("/home/ana/src/x.asm", home="/home/ana") == "~/src/x.asm"


def test_replace_home_path_uses_user_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(formatting.Path, "home", lambda: Path("/home/tester"))

    assert replace_home_path("/home/tester/boot.asm") == "~/boot.asm"


def test_format_alternatives() -> None:
    assert format_alternatives(["db", "dw"]) == '"db" | "dw"'
    assert format_alternatives([]) == ""
