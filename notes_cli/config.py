"""Load category settings from a TOML file.

Each top-level table is one category:

    [default]
    editor = "vim"
    path = "~/notes"
    filename = "%Y/%m/%Y-%m-%d"
    ext = ".md"

    [work]
    path = "~/notes/work"
    stub = "~/notes/stubs/work.md"

Fields left out stay empty and are filled from ``default`` when the
category is resolved.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import toml

from .errors import ConfigDecodeError

DEFAULT_CONFIG_PATH = Path("./config.toml")
CONFIG_ENV = "NOTES_CONFIG"

CATEGORY_FIELDS = ("editor", "stub", "path", "filename", "ext")


@dataclass(frozen=True)
class Category:
    name: str
    editor: str = ""
    stub: str = ""
    path: str = ""  # storage directory
    filename: str = ""  # strftime pattern
    ext: str = ""


@dataclass(frozen=True)
class Config:
    source: Path
    categories: dict[str, Category] = field(default_factory=dict)


def config_path(cli_value: str | None = None) -> Path:
    """Pick the config file: CLI flag, then $NOTES_CONFIG, then ./config.toml."""
    if cli_value:
        return Path(cli_value)
    env_value = os.environ.get(CONFIG_ENV, "").strip()
    if env_value:
        return Path(env_value)
    return DEFAULT_CONFIG_PATH


def _category_from_table(name: str, table: object, path: Path) -> Category:
    if not isinstance(table, dict):
        raise ConfigDecodeError(path, f"[{name}] must be a table")

    values: dict[str, str] = {}
    for key in CATEGORY_FIELDS:
        v = table.get(key, "")
        if not isinstance(v, str):
            raise ConfigDecodeError(path, f"{name}.{key} must be a string")
        values[key] = v
    return Category(name=name, **values)


def load_config(path: Path) -> Config:
    """Decode *path* into a Config. Any read or parse failure is a ConfigDecodeError."""
    try:
        with open(path, encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
        raise ConfigDecodeError(path, e) from e

    categories = {name: _category_from_table(name, table, path) for name, table in data.items()}
    return Config(source=path, categories=categories)
