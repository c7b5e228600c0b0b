from __future__ import annotations

from pathlib import Path


class NotesError(Exception):
    """Base class for every failure the `notes` command reports."""


class CommandFailed(NotesError):
    """Generic failure used in silent mode, where details are withheld."""


class ConfigDecodeError(NotesError):
    def __init__(self, path: Path, detail: object) -> None:
        super().__init__(f"cannot decode config {path}: {detail}")
        self.path = path


class CategoryNotFound(NotesError):
    def __init__(self, name: str) -> None:
        super().__init__(f"category not found: {name}")
        self.name = name


class DefaultCategoryNotFound(NotesError):
    def __init__(self) -> None:
        super().__init__("default category not found")


class DateParseError(NotesError, ValueError):
    pass


class NoteAlreadyExists(NotesError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"note already exist: {path}")
        self.path = path


class DirectoryCreateError(NotesError):
    def __init__(self, directory: Path, detail: object) -> None:
        super().__init__(f"cannot create directory {directory}: {detail}")
        self.directory = directory


class FileCreateError(NotesError):
    def __init__(self, path: Path, detail: object) -> None:
        super().__init__(f"cannot create note {path}: {detail}")
        self.path = path
