from __future__ import annotations

import logging
from pathlib import Path

from .errors import DirectoryCreateError, FileCreateError, NoteAlreadyExists

logger = logging.getLogger(__name__)


def create_note(path: Path) -> Path:
    """Create an empty note at *path*, making missing parent directories.

    Refuses to touch anything already present at *path*, a dangling
    symlink included.
    """
    if path.exists() or path.is_symlink():
        raise NoteAlreadyExists(path)

    folder = path.parent
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(folder, e) from e

    try:
        # "x" so a file appearing in the meantime is not truncated
        with open(path, "x", encoding="utf-8"):
            pass
    except FileExistsError as e:
        raise NoteAlreadyExists(path) from e
    except OSError as e:
        raise FileCreateError(path, e) from e

    logger.info("note %s created", path)
    return path
