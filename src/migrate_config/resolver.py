"""実行時に使う実効設定の解決"""

from __future__ import annotations

from collections.abc import Mapping

from .drivers import DEFAULT_TABLE_NAME, DRIVER_OVERRIDES, DriverOverrideFactory
from .env import MIGRATIONS_SCHEMA, EnvironmentProvider, OsEnvironment
from .hashing import ResolveConfig
from .models import MigrateConfig

DEFAULT_MIGRATIONS_DIR = "migrations"


class ConfigResolver:
    """MigrateConfig と環境から実効値を都度計算する。

    優先順位は常に 明示的な設定値 > 環境変数 > 組み込み定数。
    結果はキャッシュしないため、呼び出し時点の環境が反映される。
    """

    def __init__(
        self,
        config: MigrateConfig,
        env: EnvironmentProvider | None = None,
        driver_overrides: Mapping[str, DriverOverrideFactory] | None = None,
    ) -> None:
        self._config = config
        self._env = env if env is not None else OsEnvironment()
        self._driver_overrides = (
            driver_overrides if driver_overrides is not None else DRIVER_OVERRIDES
        )

    @property
    def config(self) -> MigrateConfig:
        return self._config

    def migrations_dir(self) -> str:
        if self._config.migrations_dir is not None:
            return self._config.migrations_dir
        return DEFAULT_MIGRATIONS_DIR

    def table_name(self) -> str:
        """追跡テーブル名。スキーマが解決できればスキーマ修飾する。

        table_name が既に修飾済みでもそのまま前置するため
        `schema.other.table` のような二重修飾になり得る。
        """
        table = self._config.table_name
        if table is None:
            table = DEFAULT_TABLE_NAME
        schema = self.postgres_schema()
        if schema is not None:
            return f"{schema}.{table}"
        return table

    def qualified_table_name(self, driver_kind: str) -> str:
        """ドライバ種別を考慮した追跡テーブル名。"""
        factory = self._driver_overrides.get(driver_kind.lower())
        if factory is None:
            return self.table_name()
        override = factory(self._config, self._env)
        schema = override.resolve_schema()
        table = override.resolve_table()
        if schema is None:
            return table
        return f"{schema}.{table}"

    def postgres_schema(self) -> str | None:
        """設定値、無ければ MIGRATIONS_SCHEMA。"public" は補わない。"""
        schema = self._config.drivers.postgres.schema
        if schema is not None:
            return schema
        return self._env.get(MIGRATIONS_SCHEMA)

    def ignored_chars(self) -> frozenset[str]:
        return self._config.ignored_chars

    def to_resolve_config(self) -> ResolveConfig:
        return ResolveConfig().ignore_chars(self._config.ignored_chars)
