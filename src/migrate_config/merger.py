"""設定ドキュメントのディープマージ"""

from __future__ import annotations

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """ローカル設定 override をベース設定 base に重ねた新しい辞書を返す。

    テーブル同士は再帰的にマージし、リストとスカラーは override で置換する。
    ignored-chars などの集合もリストとして置換される。
    """
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result
