"""Exceptions raised by DocSeek."""

from __future__ import annotations

from pathlib import Path


class DocSeekError(Exception):
    """Base class for all DocSeek errors."""


class ExtractionError(DocSeekError):
    """Text could not be extracted from a document."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class UnsupportedFormat(ExtractionError):
    pass


class DocumentNotFound(ExtractionError):
    pass


class DocumentReadError(ExtractionError):
    pass


class SnapshotCorrupt(DocSeekError):
    """The persisted index snapshot is malformed or unreadable."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Corrupt index snapshot {path}: {message}")
        self.path = path


class PersistenceFailure(DocSeekError):
    """The index snapshot could not be written.

    The in-memory index already holds the mutation that triggered the save,
    so callers should retry the save rather than the mutation.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Cannot write index snapshot {path}: {message}")
        self.path = path
