"""環境変数によるフォールバック値の取得"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol

MIGRATIONS_TABLE = "MIGRATIONS_TABLE"
MIGRATIONS_SCHEMA = "MIGRATIONS_SCHEMA"


class EnvironmentProvider(Protocol):
    """名前付きの外部値を読み出すプロバイダ。"""

    def get(self, name: str) -> str | None: ...


class OsEnvironment:
    """プロセス環境変数を呼び出しごとに読む。"""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "OsEnvironment()"


class MappingEnvironment:
    """任意のマッピングを環境として扱う。テストや組み込み用。"""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._values!r})"
