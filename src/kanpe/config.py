"""kanpe の設定ファイル(config.toml)のロード。

探索順:
1. `--config` で渡されたパス
2. 環境変数 KANPE_CONFIG
3. `~/.config/kanpe/config.toml`

ファイルがなければデフォルト設定で動く。

### config.toml

```toml
theme = "monokai"
include_builtin = true
sheet_dirs = ["~/notes/cheats"]
log_level = "WARNING"
log_file = ""
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

from kanpe.errors import ConfigError

DEFAULT_THEME = "monokai"
DEFAULT_CONFIG_PATH = Path("~/.config/kanpe/config.toml")


@dataclass
class KanpeConfig:
    theme: str = DEFAULT_THEME
    include_builtin: bool = True
    sheet_dirs: list[Path] = field(default_factory=list)
    log_level: str = "WARNING"
    log_file: Path | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> KanpeConfig:
        """設定ファイルを読み込む。なければデフォルト。"""
        path = resolve_config_path(path)
        if not path.exists():
            return cls()

        try:
            raw = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Could not read config {path}: {e}") from e

        sheet_dirs = raw.get("sheet_dirs", [])
        if not isinstance(sheet_dirs, list):
            raise ConfigError(f"sheet_dirs must be a list in {path}")

        include_builtin = raw.get("include_builtin", True)
        if not isinstance(include_builtin, bool):
            raise ConfigError(f"include_builtin must be true or false in {path}")

        log_file = str(raw.get("log_file", "")).strip()
        return cls(
            theme=str(raw.get("theme", DEFAULT_THEME)),
            include_builtin=include_builtin,
            sheet_dirs=[_expand(path.parent, d) for d in sheet_dirs if str(d).strip()],
            log_level=str(raw.get("log_level", "WARNING")),
            log_file=_expand(path.parent, log_file) if log_file else None,
        )


def resolve_config_path(path: Path | None = None) -> Path:
    if path is not None:
        return path.expanduser()
    env = os.environ.get("KANPE_CONFIG", "")
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def _expand(base: Path, value: str) -> Path:
    # 相対パスは設定ファイルの場所から解決する
    p = Path(str(value)).expanduser()
    if not p.is_absolute():
        p = base / p
    return p
