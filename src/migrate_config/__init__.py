"""migrate-config: マイグレーションツールの実効設定解決ライブラリ。"""

from .drivers import (
    DEFAULT_POSTGRES_SCHEMA,
    DEFAULT_TABLE_NAME,
    DRIVER_OVERRIDES,
    DriverOverride,
    PostgresOverride,
)
from .env import (
    MIGRATIONS_SCHEMA,
    MIGRATIONS_TABLE,
    EnvironmentProvider,
    MappingEnvironment,
    OsEnvironment,
)
from .exceptions import ConfigError, ConfigErrorCodes
from .hashing import ResolveConfig
from .inference import (
    AuthoredMigration,
    ResolvedDefaults,
    infer_migration_type,
    infer_versioning,
    next_version,
    resolve_defaults,
)
from .loader import default_config, load, load_or_default, parse_document
from .merger import deep_merge
from .models import (
    DefaultMigrationType,
    DefaultVersioning,
    Drivers,
    MigrateConfig,
    MigrationDefaults,
    PostgresDriver,
)
from .resolver import DEFAULT_MIGRATIONS_DIR, ConfigResolver

__all__ = [
    "MigrateConfig",
    "MigrationDefaults",
    "Drivers",
    "PostgresDriver",
    "DefaultMigrationType",
    "DefaultVersioning",
    "EnvironmentProvider",
    "OsEnvironment",
    "MappingEnvironment",
    "MIGRATIONS_TABLE",
    "MIGRATIONS_SCHEMA",
    "ConfigResolver",
    "DEFAULT_MIGRATIONS_DIR",
    "DEFAULT_TABLE_NAME",
    "DEFAULT_POSTGRES_SCHEMA",
    "DriverOverride",
    "PostgresOverride",
    "DRIVER_OVERRIDES",
    "ResolveConfig",
    "AuthoredMigration",
    "ResolvedDefaults",
    "infer_migration_type",
    "infer_versioning",
    "resolve_defaults",
    "next_version",
    "load",
    "load_or_default",
    "default_config",
    "parse_document",
    "deep_merge",
    "ConfigError",
    "ConfigErrorCodes",
]
