"""migrate-config テスト共通フィクスチャ"""

from pathlib import Path

import pytest
from migrate_config.env import MappingEnvironment

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def empty_env() -> MappingEnvironment:
    """環境変数が何も設定されていない環境。"""
    return MappingEnvironment()


@pytest.fixture
def test_env() -> MappingEnvironment:
    """MIGRATIONS_TABLE と MIGRATIONS_SCHEMA が設定された環境。"""
    return MappingEnvironment(
        {
            "MIGRATIONS_TABLE": "test_migrations",
            "MIGRATIONS_SCHEMA": "test_schema",
        }
    )
