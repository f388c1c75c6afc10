"""migrate-config ライブラリの例外型定義"""

from __future__ import annotations


class ConfigError(Exception):
    """設定読み込みのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE_ERROR"
    UNSUPPORTED_FORMAT: str = "UNSUPPORTED_FORMAT_ERROR"
    PARSE_TOML: str = "PARSE_TOML_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    INVALID_ROOT: str = "INVALID_ROOT_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
