"""kanpe のエラー定義。

- パーサ/インデックスは例外を送出するだけでログは出さない
- CLI が `KanpeError` を受けて赤字表示 + 終了コード1にする
"""

from __future__ import annotations


class KanpeError(Exception):
    """kanpe が利用者に見せるエラーの基底クラス。"""


class SheetNotFound(KanpeError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Could not find sheet at index {index}")
        self.index = index


class InvalidSectionNumber(KanpeError):
    pass


class ParseFailure(KanpeError):
    """シートをセクションに分割できなかった。"""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UsageError(KanpeError):
    pass


class ConfigError(KanpeError):
    pass
