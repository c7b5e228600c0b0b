from __future__ import annotations

from datetime import date
from pathlib import Path

from .config import Category


def build_note_path(category: Category, when: date, sub_directory: str | None = None) -> Path:
    """Return ``<path>/<sub_directory>/<strftime(filename)><ext>`` for *when*.

    The filename pattern may contain ``/`` to spread notes over folders
    (``%Y/%m/%d``). *ext* is appended as written, dot included.
    """
    base = Path(category.path).expanduser()
    if sub_directory:
        base = base / sub_directory
    return base / (when.strftime(category.filename) + category.ext)
