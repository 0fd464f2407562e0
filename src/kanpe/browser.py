"""シートの一覧/目次/セクション表示。

CLI から呼ばれる4つの操作をまとめる。

- `show_available_sheets`: 全シートの見出し + 目次（壊れたシートは飛ばす）
- `show_sheet_outline`: 1シートの目次
- `show_section`: 1セクションをハイライト表示
- `show_full_sheet`: シート全文をハイライト表示（分割しない）

文字列を返す `outline` / `section_content` / `full_content` は表示なしの版。
"""

from __future__ import annotations

import logging
import re

from rich.console import Console
from rich.text import Text

from kanpe.display import outline_lines, sheet_heading
from kanpe.errors import InvalidSectionNumber, ParseFailure, SheetNotFound
from kanpe.render import Renderer
from kanpe.section import Section
from kanpe.sheets import Document, DocumentIndex

log = logging.getLogger(__name__)

_NUMBER = re.compile(r"\+?[0-9]+")


def parse_number(value: str) -> int | None:
    """`"3"` や `"+3"` を整数にする。数字でなければ None。"""
    if not _NUMBER.fullmatch(value):
        return None
    return int(value)


class SheetBrowser:
    def __init__(
        self,
        index: DocumentIndex,
        *,
        renderer: Renderer | None = None,
        console: Console | None = None,
    ) -> None:
        self.index = index
        self.renderer = renderer or Renderer()
        self.console = console or Console()

    # --- queries ---

    def _document(self, sheet_index: int) -> Document:
        doc = self.index.get(sheet_index)
        if doc is None:
            raise SheetNotFound(sheet_index)
        return doc

    def outline(self, sheet_index: int) -> tuple[str, list[str]]:
        """(見出し, 目次行) を返す。"""
        doc = self._document(sheet_index)
        parsed = self.index.parse(sheet_index)
        return sheet_heading(sheet_index, doc.name), outline_lines(parsed.titles())

    def section(self, sheet_index: int, section_number: str) -> Section:
        parsed = self.index.parse(sheet_index)
        n = parse_number(section_number)
        if n is None:
            raise InvalidSectionNumber("Section number must be a positive integer")
        if n == 0 or n > len(parsed.sections):
            raise InvalidSectionNumber("Invalid section number")
        return parsed.sections[n - 1]

    def section_content(self, sheet_index: int, section_number: str) -> str:
        return self.section(sheet_index, section_number).content

    def full_content(self, sheet_index: int) -> str:
        return self._document(sheet_index).text

    # --- output ---

    def show_available_sheets(self) -> None:
        for i, doc in enumerate(self.index):
            try:
                heading, lines = self.outline(i)
            except ParseFailure as e:
                log.debug("sheet %s skipped: %s", doc.name, e)
                continue
            self.console.print()
            self._print_outline(heading, lines)

    def show_sheet_outline(self, sheet_index: int) -> None:
        heading, lines = self.outline(sheet_index)
        self._print_outline(heading, lines)

    def show_section(self, sheet_index: int, section_number: str) -> None:
        content = self.section_content(sheet_index, section_number)
        self._print_block(self.renderer.render(content, self._document(sheet_index).lexer))

    def show_full_sheet(self, sheet_index: int) -> None:
        doc = self._document(sheet_index)
        self._print_block(self.renderer.render(doc.text, doc.lexer))

    def _print_outline(self, heading: str, lines: list[str]) -> None:
        self.console.print(self.renderer.render_header(heading, True))
        for line in lines:
            self.console.print(self.renderer.render_header(line, False))

    def _print_block(self, text: Text) -> None:
        end = "" if text.plain.endswith("\n") else "\n"
        self.console.print(text, end=end, soft_wrap=True)
