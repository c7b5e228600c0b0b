from __future__ import annotations

from pathlib import Path

import pytest

from notes_cli.config import DEFAULT_CONFIG_PATH, Category, config_path, load_config
from notes_cli.errors import ConfigDecodeError


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "config.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_load_config_reads_categories(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        '[default]\neditor = "vim"\npath = "~/notes"\nfilename = "%Y-%m-%d"\next = ".md"\n'
        '\n[work]\npath = "~/work"\nunknown = 3\n',
    )
    cfg = load_config(p)

    assert cfg.source == p
    assert cfg.categories["default"] == Category(
        name="default", editor="vim", path="~/notes", filename="%Y-%m-%d", ext=".md"
    )
    # missing fields stay empty, unknown keys are ignored
    assert cfg.categories["work"] == Category(name="work", path="~/work")


def test_missing_file_is_decode_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigDecodeError):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml_is_decode_error(tmp_path: Path) -> None:
    p = _write(tmp_path, "[default\npath = ")
    with pytest.raises(ConfigDecodeError) as ei:
        load_config(p)
    assert str(p) in str(ei.value)


def test_top_level_value_is_decode_error(tmp_path: Path) -> None:
    p = _write(tmp_path, 'path = "~/notes"\n')
    with pytest.raises(ConfigDecodeError):
        load_config(p)


def test_non_string_field_is_decode_error(tmp_path: Path) -> None:
    p = _write(tmp_path, "[default]\next = 1\n")
    with pytest.raises(ConfigDecodeError):
        load_config(p)


def test_config_path_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NOTES_CONFIG", raising=False)
    assert config_path() == DEFAULT_CONFIG_PATH

    monkeypatch.setenv("NOTES_CONFIG", "/etc/notes.toml")
    assert config_path() == Path("/etc/notes.toml")
    assert config_path("other.toml") == Path("other.toml")


def test_non_utf8_file_is_decode_error(tmp_path: Path) -> None:
    p = tmp_path / "config.toml"
    p.write_bytes(b'[default]\npath = "\xff\xfe"\n')
    with pytest.raises(ConfigDecodeError):
        load_config(p)
