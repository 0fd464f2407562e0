"""シート本文をセクションに分割する。

シートはコメント行の区切り線 + 番号つき見出し行でセクションを表す。

```
# ------------------------
# 3. Functions
# ------------------------
def f(x): ...
```

- 区切り線: `# ----` または `// ----` で始まる行（どちらも正式な書式）
- 見出し行: 区切り線の直後の行で、先頭の `#` `/` 空白を除くと `". "` を含む
- 区切り線 + 見出し行 の2行が揃った位置がセクションの開始

最初のセクションより前の行はどのセクションにも属さず捨てられる。
"""

from __future__ import annotations

from kanpe.errors import ParseFailure
from kanpe.section import ParsedDocument, Section

DIVIDER_PREFIXES = ("# ----", "// ----")
MARKER_CHARS = "#/ "
TITLE_SEPARATOR = ". "


def is_divider(line: str) -> bool:
    return line.startswith(DIVIDER_PREFIXES)


def is_header(line: str) -> bool:
    return TITLE_SEPARATOR in line.lstrip(MARKER_CHARS)


def split_header(line: str) -> tuple[str, str]:
    """見出し行を (番号, タイトル) に分ける。区切りがなければ ParseFailure。"""
    number, sep, title = line.lstrip(MARKER_CHARS).partition(TITLE_SEPARATOR)
    if not sep:
        raise ParseFailure("Invalid section title format")
    return number, title


def split_lines(text: str) -> list[str]:
    """LF だけで行に分ける。行末の CR は1つ落とす。

    フォームフィードや U+2028 は行の一部として残す。
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def segment(text: str) -> list[Section]:
    """本文をセクションのリストにする。セクションがなければ空リスト。"""
    lines = split_lines(text)
    starts = find_section_starts(lines)
    return build_sections(lines, starts)


def parse_document(text: str) -> ParsedDocument:
    return ParsedDocument(sections=tuple(segment(text)))


def find_section_starts(lines: list[str]) -> list[int]:
    """区切り線 + 見出し行 の組が始まる行番号を返す。"""
    return [
        i
        for i, (line, following) in enumerate(zip(lines, lines[1:]))
        if is_divider(line) and is_header(following)
    ]


def build_sections(lines: list[str], starts: list[int]) -> list[Section]:
    sections: list[Section] = []
    for k, start in enumerate(starts):
        end = starts[k + 1] if k + 1 < len(starts) else len(lines)
        sections.append(_create_section(lines, start, end))
    return sections


def _create_section(lines: list[str], start: int, end: int) -> Section:
    if start + 1 >= end:
        raise ParseFailure("Missing section title")
    title_line = lines[start + 1]
    _number, title = split_header(title_line)
    if not title:
        raise ParseFailure(f"Empty section title: {title_line!r}")

    # 見出しの次の1行は必須（本文が空のセクションはエラー扱い）
    if start + 2 >= end:
        raise ParseFailure(f"Missing section body: {title}")

    content = "\n".join(
        [
            lines[start],
            title_line,
            lines[start + 2],
            "\n".join(lines[start + 3 : end]),
        ]
    )
    return Section(title=title, content=content)
