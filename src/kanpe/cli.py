"""kanpe CLI エントリポイント。

```
kanpe                 # 全シートの一覧と目次
kanpe 0               # シート0の目次
kanpe 0 3             # シート0のセクション3
kanpe 0 0             # シート0の全文
```
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer
from rich.console import Console

from kanpe.browser import SheetBrowser, parse_number
from kanpe.config import KanpeConfig
from kanpe.errors import KanpeError, UsageError
from kanpe.logging_setup import setup_logging
from kanpe.render import Renderer
from kanpe.sheets import build_index

APP_HELP = "📝 kanpe: 端末で読むチートシート"

app = typer.Typer(add_completion=False, help=APP_HELP)
err_console = Console(stderr=True)
log = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        v = version("kanpe")
    except PackageNotFoundError:
        v = "unknown"
    typer.echo(f"kanpe {v}")
    raise typer.Exit()


def parse_sheet_index(value: str) -> int:
    n = parse_number(value)
    if n is None:
        raise UsageError("Sheet index must be a positive integer")
    return n


def dispatch(browser: SheetBrowser, sheet: str | None, section: str | None) -> None:
    """引数の形に応じて操作を選ぶ。"""
    if sheet is None:
        if section is not None:
            raise UsageError("Usage: kanpe [SHEET] [SECTION]")
        browser.show_available_sheets()
        return

    sheet_index = parse_sheet_index(sheet)
    if section is None:
        browser.show_sheet_outline(sheet_index)
    elif section == "0":
        browser.show_full_sheet(sheet_index)
    else:
        browser.show_section(sheet_index, section)


@app.command()
def main(
    sheet: str | None = typer.Argument(None, help="シート番号（0始まり）"),
    section: str | None = typer.Argument(
        None, help="セクション番号（1始まり、0 なら全文）"
    ),
    config: Path | None = typer.Option(
        None, "--config", help="設定ファイル (既定: ~/.config/kanpe/config.toml)"
    ),
    theme: str | None = typer.Option(
        None, "--theme", help="ハイライトのテーマ (例: monokai / dracula)"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="色をつけない"),
    log_level: str | None = typer.Option(None, "--log-level", help="ログレベル"),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="バージョンを表示",
    ),
) -> None:
    """シートの一覧・目次・セクションを表示する。"""
    try:
        cfg = KanpeConfig.load(config)
        setup_logging(level=log_level or cfg.log_level, log_path=cfg.log_file)

        index = build_index(cfg)
        log.debug("sheets: %s", ", ".join(index.names()))

        browser = SheetBrowser(
            index,
            renderer=Renderer(theme=theme or cfg.theme),
            console=Console(no_color=no_color),
        )
        dispatch(browser, sheet, section)
    except KanpeError as e:
        err_console.print(Renderer().render_error(str(e)))
        raise typer.Exit(code=1) from e
