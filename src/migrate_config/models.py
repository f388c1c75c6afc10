"""設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .env import MIGRATIONS_SCHEMA, MIGRATIONS_TABLE, EnvironmentProvider, OsEnvironment


def _kebab(name: str) -> str:
    return name.replace("_", "-")


def _context_env(info: ValidationInfo) -> EnvironmentProvider:
    """バリデーションコンテキストの "env" を返す。無ければプロセス環境。"""
    context = info.context or {}
    env = context.get("env")
    return env if env is not None else OsEnvironment()


class DefaultMigrationType(StrEnum):
    """`migrate add` が作成するマイグレーションの種類。"""

    INFERRED = "inferred"
    SIMPLE = "simple"
    REVERSIBLE = "reversible"


class DefaultVersioning(StrEnum):
    """新しいマイグレーションのバージョン番号の採番方式。"""

    INFERRED = "inferred"
    TIMESTAMP = "timestamp"
    SEQUENTIAL = "sequential"


class MigrationDefaults(BaseModel):
    """`migrate add` のデフォルト設定。"""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=_kebab,
        populate_by_name=True,
    )

    migration_type: DefaultMigrationType = DefaultMigrationType.INFERRED
    migration_versioning: DefaultVersioning = DefaultVersioning.INFERRED


class PostgresDriver(BaseModel):
    """PostgreSQL 固有のマイグレーション設定。

    schema が入力に無い場合は構築時に MIGRATIONS_SCHEMA を読む。
    明示的な None はそのまま保持する。
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=_kebab,
        populate_by_name=True,
    )

    schema_: str | None = Field(default=None, alias="schema")

    @model_validator(mode="before")
    @classmethod
    def _schema_from_env(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        if "schema" in data or "schema_" in data:
            return data
        data = dict(data)
        data["schema"] = _context_env(info).get(MIGRATIONS_SCHEMA)
        return data

    @property
    def schema(self) -> str | None:  # type: ignore[override]
        return self.schema_


class Drivers(BaseModel):
    """データベース種別ごとの設定。"""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=_kebab,
        populate_by_name=True,
    )

    postgres: PostgresDriver = Field(default_factory=PostgresDriver)

    @model_validator(mode="before")
    @classmethod
    def _ensure_postgres(cls, data: Any) -> Any:
        # コンテキスト付きで PostgresDriver を検証させるため空テーブルを補う
        if isinstance(data, dict) and "postgres" not in data:
            data = dict(data)
            data["postgres"] = {}
        return data


class MigrateConfig(BaseModel):
    """`[migrate]` セクション全体。

    table_name が入力に無い場合は構築時に MIGRATIONS_TABLE を読む。
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=_kebab,
        populate_by_name=True,
    )

    create_schemas: frozenset[str] = frozenset()
    table_name: str | None = None
    migrations_dir: str | None = None
    ignored_chars: frozenset[str] = frozenset()
    defaults: MigrationDefaults = Field(default_factory=MigrationDefaults)
    drivers: Drivers = Field(default_factory=Drivers)

    @model_validator(mode="before")
    @classmethod
    def _fill_from_env(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "table_name" not in data and "table-name" not in data:
            data["table_name"] = _context_env(info).get(MIGRATIONS_TABLE)
        if "drivers" not in data:
            data["drivers"] = {}
        return data

    @field_validator("ignored_chars")
    @classmethod
    def _single_characters(cls, value: frozenset[str]) -> frozenset[str]:
        for ch in value:
            if len(ch) != 1:
                raise ValueError(f"ignored-chars entries must be single characters, got {ch!r}")
        return value
