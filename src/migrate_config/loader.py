"""設定ファイル読み込み"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from .env import EnvironmentProvider, OsEnvironment
from .exceptions import ConfigError, ConfigErrorCodes
from .merger import deep_merge
from .models import MigrateConfig

logger = structlog.get_logger(__name__)

SECTION = "migrate"

_TOML_SUFFIXES = {".toml"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_document(path: Path) -> dict[str, Any]:
    """拡張子に応じて TOML または YAML を読み込む。"""
    suffix = path.suffix.lower()
    if suffix not in _TOML_SUFFIXES | _YAML_SUFFIXES:
        raise ConfigError(
            code=ConfigErrorCodes.UNSUPPORTED_FORMAT,
            message=f"Unsupported config format: {path.suffix or '(none)'} ({path})",
        )
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e

    if suffix in _TOML_SUFFIXES:
        try:
            data: Any = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                code=ConfigErrorCodes.PARSE_TOML,
                message=f"Failed to parse TOML: {path}: {e}",
                cause=e,
            ) from e
    else:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                code=ConfigErrorCodes.PARSE_YAML,
                message=f"Failed to parse YAML: {path}",
                cause=e,
            ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.INVALID_ROOT,
            message=f"Config root must be a table, got {type(data).__name__}: {path}",
        )
    logger.debug("config document read", path=str(path), format=suffix.lstrip("."))
    return data


def parse_document(
    data: dict[str, Any],
    *,
    env: EnvironmentProvider | None = None,
) -> MigrateConfig:
    """読み込み済みドキュメントの `migrate` テーブルを MigrateConfig に変換する。

    `migrate` 以外のトップレベルテーブルは無視する。
    """
    section = data.get(SECTION, {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(
            code=ConfigErrorCodes.INVALID_ROOT,
            message=f"[{SECTION}] must be a table, got {type(section).__name__}",
        )
    try:
        return MigrateConfig.model_validate(
            section,
            context={"env": env if env is not None else OsEnvironment()},
        )
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed in [{SECTION}]: {e}",
            cause=e,
        ) from e


def load(
    base_path: Path,
    local_path: Path | None = None,
    *,
    env: EnvironmentProvider | None = None,
) -> MigrateConfig:
    """設定ファイルを読み込んで MigrateConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    local_path: ローカル設定ファイルパス（オプション）。存在する場合はベースにマージ。
    env: 構築時に参照する環境。省略時はプロセス環境変数。
    """
    data = _read_document(base_path)
    if local_path is not None and local_path.exists():
        data = deep_merge(data, _read_document(local_path))
        logger.debug("local config merged", base=str(base_path), local=str(local_path))
    return parse_document(data, env=env)


def default_config(env: EnvironmentProvider | None = None) -> MigrateConfig:
    """設定ファイルが無い場合の MigrateConfig を返す。"""
    return parse_document({}, env=env)


def load_or_default(
    path: Path,
    *,
    env: EnvironmentProvider | None = None,
) -> MigrateConfig:
    """path が存在すれば読み込み、無ければデフォルト設定を返す。"""
    if not path.exists():
        logger.debug("config file not found, using defaults", path=str(path))
        return default_config(env)
    return load(path, env=env)
