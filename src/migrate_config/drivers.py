"""データベース種別ごとのスキーマ・テーブル名解決"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol

from .env import MIGRATIONS_SCHEMA, MIGRATIONS_TABLE, EnvironmentProvider
from .models import MigrateConfig

DEFAULT_TABLE_NAME = "_sqlx_migrations"
DEFAULT_POSTGRES_SCHEMA = "public"


class DriverOverride(Protocol):
    """ドライバ固有のスキーマ・テーブル名解決。"""

    def resolve_schema(self) -> str | None: ...

    def resolve_table(self) -> str: ...


DriverOverrideFactory = Callable[[MigrateConfig, EnvironmentProvider], DriverOverride]


class PostgresOverride:
    """PostgreSQL 用。設定値 > 環境変数 > 組み込み定数 の順で解決する。"""

    def __init__(self, config: MigrateConfig, env: EnvironmentProvider) -> None:
        self._config = config
        self._env = env

    def resolve_schema(self) -> str:
        schema = self._config.drivers.postgres.schema
        if schema is not None:
            return schema
        env_schema = self._env.get(MIGRATIONS_SCHEMA)
        if env_schema is not None:
            return env_schema
        return DEFAULT_POSTGRES_SCHEMA

    def resolve_table(self) -> str:
        if self._config.table_name is not None:
            return self._config.table_name
        env_table = self._env.get(MIGRATIONS_TABLE)
        if env_table is not None:
            return env_table
        return DEFAULT_TABLE_NAME


DRIVER_OVERRIDES: Mapping[str, DriverOverrideFactory] = {
    "postgres": PostgresOverride,
    "postgresql": PostgresOverride,
}
