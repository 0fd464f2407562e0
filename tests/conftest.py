from __future__ import annotations

from pathlib import Path

import pytest

from kanpe.sheets import Document, DocumentIndex

TWO_SECTIONS = "# ----\n# 1. Intro\nline\nbody\n# ----\n# 2. Outro\nline\nbody"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """利用者の ~/.config/kanpe を読まないようにする。"""
    p = tmp_path / "no-config.toml"
    monkeypatch.setenv("KANPE_CONFIG", str(p))
    return p


@pytest.fixture()
def two_sections() -> str:
    return TWO_SECTIONS


@pytest.fixture()
def demo_index() -> DocumentIndex:
    return DocumentIndex(
        [
            Document(name="demo_sheet", text=TWO_SECTIONS, lexer="python"),
            Document(name="broken", text="# ----\n# 1. Only Header", lexer="text"),
            Document(name="no-sections", text="just\nsome\ntext\n", lexer="text"),
        ]
    )


@pytest.fixture()
def sheet_dir(tmp_path: Path) -> Path:
    d = tmp_path / "cheats"
    d.mkdir()
    (d / "git.txt").write_text(
        "# Git\n"
        "# ----------\n"
        "# 1. Branches\n"
        "# ----------\n"
        "git switch -c topic\n"
        "# ----------\n"
        "# 2. Stash\n"
        "# ----------\n"
        "git stash pop\n",
        encoding="utf-8",
    )
    (d / "awk.sh").write_text(
        "// ----\n// 1. Fields\n// ----\nawk '{print $1}'\n",
        encoding="utf-8",
    )
    (d / ".hidden").write_text("ignored", encoding="utf-8")
    return d
