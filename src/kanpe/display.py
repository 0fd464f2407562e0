"""表示名/ツリー記号などUI向け補助。"""

from __future__ import annotations

import re

TREE_BRANCH = "├──"
TREE_LAST = "└──"


def display_name(name: str) -> str:
    """`rust_async-io` -> `Rust Async Io`"""
    words = re.split(r"[_-]", name)
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def sheet_heading(index: int, name: str) -> str:
    return f"{index} - {display_name(name)}"


def tree_prefix(i: int, count: int) -> str:
    return TREE_LAST if i == count - 1 else TREE_BRANCH


def outline_lines(titles: list[str]) -> list[str]:
    return [
        f"{tree_prefix(i, len(titles))} {i + 1}. {title}"
        for i, title in enumerate(titles)
    ]
