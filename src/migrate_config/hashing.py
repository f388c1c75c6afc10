"""マイグレーションのハッシュ計算前に除外する文字の設定"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolveConfig:
    """ハッシュ計算側に渡すアダプタ。

    ダイジェストのアルゴリズムは持たず、内容から除外文字を取り除くだけ。
    """

    ignored_chars: frozenset[str] = field(default_factory=frozenset)

    def ignore_chars(self, chars: Iterable[str]) -> ResolveConfig:
        """除外文字を追加した新しい ResolveConfig を返す。"""
        return ResolveConfig(ignored_chars=self.ignored_chars | frozenset(chars))

    def strip(self, content: str) -> str:
        if not self.ignored_chars:
            return content
        return "".join(ch for ch in content if ch not in self.ignored_chars)

    def strip_bytes(self, data: bytes) -> bytes:
        """UTF-8 としてデコードし、除外文字を取り除いて再エンコードする。"""
        return self.strip(data.decode("utf-8")).encode("utf-8")
