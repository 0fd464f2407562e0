"""端末表示用のレンダラ（rich）。

- コードは rich.syntax.Syntax でハイライト
- 区切り線/見出し行はコードではなく見出しとして色づけ
"""

from __future__ import annotations

from rich.syntax import Syntax
from rich.text import Text

from kanpe.config import DEFAULT_THEME
from kanpe.parser import is_divider, is_header

TITLE_STYLE = "bold cyan"
HEADER_STYLE = "blue"
ERROR_STYLE = "bold red"


class Renderer:
    def __init__(self, theme: str = DEFAULT_THEME) -> None:
        self.theme = theme

    def render(self, text: str, lexer: str = "text") -> Text:
        """シート本文をハイライト済みの Text にする。"""
        syntax = Syntax("", lexer, theme=self.theme, background_color="default")
        out = Text()
        code: list[str] = []
        prev_divider = False

        for line in _lines_with_endings(text):
            marker = is_divider(line) or (prev_divider and is_header(line))
            prev_divider = is_divider(line)
            if not marker:
                code.append(line)
                continue
            if code:
                out.append_text(self._highlight(syntax, "".join(code)))
                code = []
            out.append(line, style=HEADER_STYLE)

        if code:
            out.append_text(self._highlight(syntax, "".join(code)))
        return out

    def render_header(self, text: str, emphasized: bool = False) -> Text:
        return Text(text, style=TITLE_STYLE if emphasized else HEADER_STYLE)

    def render_error(self, message: str) -> Text:
        return Text(f"Error: {message}", style=ERROR_STYLE)

    @staticmethod
    def _highlight(syntax: Syntax, code: str) -> Text:
        highlighted = syntax.highlight(code)
        # pygments は末尾に改行を補うので元の形に戻す
        if highlighted.plain.endswith("\n") and not code.endswith("\n"):
            highlighted.right_crop(1)
        return highlighted


def _lines_with_endings(text: str) -> list[str]:
    # パーサと同じく LF だけを行の区切りにする
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines
