"""セクション/パース結果のデータ型。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    title: str
    content: str  # 区切り線・見出し行を含む原文そのまま


@dataclass(frozen=True)
class ParsedDocument:
    sections: tuple[Section, ...] = ()

    def __len__(self) -> int:
        return len(self.sections)

    def titles(self) -> list[str]:
        return [s.title for s in self.sections]
