"""シート集合（DocumentIndex）と読み込み。

- 同梱シート: `bundled/sheets.toml` に並べた順が表示順
- 利用者のシート: 設定 `sheet_dirs` のディレクトリ内ファイルを名前順に追加

一度組み立てたら変更しない。CLI が起動時に1つ作って SheetBrowser に渡す。

### bundled/sheets.toml

```toml
[[sheets]]
name = "basics"
file = "basics.txt"
lexer = "python"
```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

from rich.syntax import Syntax

from kanpe.config import KanpeConfig
from kanpe.errors import ConfigError, SheetNotFound
from kanpe.parser import parse_document
from kanpe.section import ParsedDocument

log = logging.getLogger(__name__)

BUNDLED_SHEETS_DIR = Path(__file__).parent / "bundled"
MANIFEST_NAME = "sheets.toml"


@dataclass(frozen=True)
class Document:
    name: str
    text: str
    lexer: str = "text"


class DocumentIndex:
    """名前つきシートの固定リスト。位置(0始まり)で引く。"""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents: tuple[Document, ...] = tuple(documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def names(self) -> list[str]:
        return [d.name for d in self._documents]

    def get(self, position: int) -> Document | None:
        if 0 <= position < len(self._documents):
            return self._documents[position]
        return None

    def parse(self, position: int) -> ParsedDocument:
        doc = self.get(position)
        if doc is None:
            raise SheetNotFound(position)
        return parse_document(doc.text)


def load_manifest(directory: Path) -> list[Document]:
    """sheets.toml に書かれた順でシートを読み込む。"""
    manifest = directory / MANIFEST_NAME
    try:
        raw = tomllib.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read sheet manifest {manifest}: {e}") from e

    docs: list[Document] = []
    for entry in raw.get("sheets", []):
        if not isinstance(entry, dict):
            log.warning("manifest entry without name/file skipped: %r", entry)
            continue
        name = str(entry.get("name", "")).strip()
        file = str(entry.get("file", "")).strip()
        if not name or not file:
            log.warning("manifest entry without name/file skipped: %r", entry)
            continue
        path = directory / file
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read sheet {path}: {e}") from e
        docs.append(Document(name=name, text=text, lexer=str(entry.get("lexer", "text"))))
        log.debug("loaded sheet %s from %s", name, path)
    return docs


def load_bundled_sheets() -> list[Document]:
    return load_manifest(BUNDLED_SHEETS_DIR)


def load_sheet_dir(directory: Path) -> list[Document]:
    """ディレクトリ内のファイルをシートとして読む（名前順）。"""
    if not directory.is_dir():
        log.warning("sheet directory not found: %s", directory)
        return []

    docs: list[Document] = []
    for path in sorted(p for p in directory.iterdir() if p.is_file()):
        if path.name.startswith("."):
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("could not read sheet %s: %s", path, e)
            continue
        docs.append(
            Document(
                name=path.stem,
                text=text,
                lexer=Syntax.guess_lexer(str(path), code=text),
            )
        )
        log.debug("loaded sheet %s from %s", path.stem, path)
    return docs


def build_index(config: KanpeConfig | None = None) -> DocumentIndex:
    """同梱シート + 利用者シートの順で DocumentIndex を作る。"""
    config = config or KanpeConfig()

    docs: list[Document] = []
    if config.include_builtin:
        docs.extend(load_bundled_sheets())
    for d in config.sheet_dirs:
        docs.extend(load_sheet_dir(d))

    seen: set[str] = set()
    unique: list[Document] = []
    for doc in docs:
        if doc.name in seen:
            log.warning("duplicate sheet name ignored: %s", doc.name)
            continue
        seen.add(doc.name)
        unique.append(doc)
    return DocumentIndex(unique)
