"""既存マイグレーション履歴からの作成デフォルト推論"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

import structlog

from .models import DefaultMigrationType, DefaultVersioning, MigrationDefaults

logger = structlog.get_logger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class AuthoredMigration:
    """作成済みマイグレーション 1 件。"""

    version: int
    migration_type: DefaultMigrationType

    def __post_init__(self) -> None:
        if self.migration_type is DefaultMigrationType.INFERRED:
            raise ValueError(
                f"migration {self.version} must be simple or reversible, not inferred"
            )


@dataclass(frozen=True)
class ResolvedDefaults:
    """推論済みの作成デフォルト。INFERRED を含まない。"""

    migration_type: DefaultMigrationType
    migration_versioning: DefaultVersioning


def _ordered(history: Sequence[AuthoredMigration]) -> list[AuthoredMigration]:
    return sorted(history, key=lambda m: m.version)


def infer_migration_type(history: Sequence[AuthoredMigration]) -> DefaultMigrationType:
    """最新のマイグレーションと同じ種類。履歴が無ければ SIMPLE。"""
    ordered = _ordered(history)
    if not ordered:
        return DefaultMigrationType.SIMPLE
    return ordered[-1].migration_type


def infer_versioning(history: Sequence[AuthoredMigration]) -> DefaultVersioning:
    """採番方式を推論する。

    * 履歴なし → SEQUENTIAL
    * 1 件のみでバージョンが 1 → SEQUENTIAL
    * 直近 2 件のバージョン差がちょうど 1 → SEQUENTIAL
    * それ以外 → TIMESTAMP
    """
    versions = [m.version for m in _ordered(history)]
    if not versions:
        return DefaultVersioning.SEQUENTIAL
    if len(versions) == 1:
        if versions[0] == 1:
            return DefaultVersioning.SEQUENTIAL
        return DefaultVersioning.TIMESTAMP
    if versions[-1] - versions[-2] == 1:
        return DefaultVersioning.SEQUENTIAL
    return DefaultVersioning.TIMESTAMP


def resolve_defaults(
    defaults: MigrationDefaults,
    history: Sequence[AuthoredMigration],
    *,
    migration_type: DefaultMigrationType | None = None,
    versioning: DefaultVersioning | None = None,
) -> ResolvedDefaults:
    """設定の INFERRED を履歴から推論した値に置き換える。

    migration_type / versioning は呼び出しごとの明示指定（CLI フラグ等）で、
    設定値より優先する。
    """
    chosen_type = migration_type or defaults.migration_type
    if chosen_type is DefaultMigrationType.INFERRED:
        chosen_type = infer_migration_type(history)
        logger.debug("migration type inferred", migration_type=str(chosen_type), history=len(history))

    chosen_versioning = versioning or defaults.migration_versioning
    if chosen_versioning is DefaultVersioning.INFERRED:
        chosen_versioning = infer_versioning(history)
        logger.debug("versioning inferred", versioning=str(chosen_versioning), history=len(history))

    return ResolvedDefaults(
        migration_type=chosen_type,
        migration_versioning=chosen_versioning,
    )


def next_version(
    versioning: DefaultVersioning,
    history: Sequence[AuthoredMigration],
    now: datetime | None = None,
) -> int:
    """新しいマイグレーションのバージョン番号を返す。"""
    if versioning is DefaultVersioning.SEQUENTIAL:
        ordered = _ordered(history)
        return ordered[-1].version + 1 if ordered else 1
    if versioning is DefaultVersioning.TIMESTAMP:
        moment = now if now is not None else datetime.now(timezone.utc)
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return int(moment.strftime(TIMESTAMP_FORMAT))
    raise ValueError("versioning must be resolved before computing the next version")
