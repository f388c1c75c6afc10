"""ResolveConfig のユニットテスト"""

from migrate_config.hashing import ResolveConfig


def test_strip_removes_ignored_chars() -> None:
    """除外文字が取り除かれること。"""
    config = ResolveConfig(frozenset({" ", "\r"}))
    assert config.strip("CREATE TABLE t;\r\n") == "CREATETABLEt;\n"


def test_strip_without_ignored_chars() -> None:
    """除外文字が無ければ内容は変わらないこと。"""
    content = "CREATE TABLE t;\r\n"
    assert ResolveConfig().strip(content) == content


def test_crlf_and_lf_hash_inputs_match() -> None:
    """CR を除外すると CRLF と LF の内容が一致すること。"""
    config = ResolveConfig().ignore_chars(["\r"])
    assert config.strip("a;\r\nb;\r\n") == config.strip("a;\nb;\n")


def test_strip_bytes() -> None:
    """バイト列も UTF-8 として処理されること。"""
    config = ResolveConfig(frozenset({"\ufeff"}))
    data = "\ufeffSELECT 1;".encode("utf-8")
    assert config.strip_bytes(data) == b"SELECT 1;"


def test_ignore_chars_returns_new_instance() -> None:
    """ignore_chars は元のインスタンスを変更しないこと。"""
    base = ResolveConfig(frozenset({" "}))
    extended = base.ignore_chars(["\t", " "])
    assert base.ignored_chars == frozenset({" "})
    assert extended.ignored_chars == frozenset({" ", "\t"})
