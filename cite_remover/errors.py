from __future__ import annotations

from pathlib import Path


class CiteRemoverError(Exception):
    """Base error for a document that could not be processed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ReadError(CiteRemoverError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Could not read document")


class CreateError(CiteRemoverError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Could not create document")


class WriteError(CiteRemoverError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Could not write document")
