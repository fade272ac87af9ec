from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Protocol, Sequence

from cite_remover.errors import CreateError, ReadError, WriteError

LOGGER = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class DocumentStore(Protocol):
    """Storage the remover reads from and writes back to."""

    def list_documents(self) -> List[Path]: ...

    def read(self, document: Path) -> str: ...

    def create(self, path: Path, text: str) -> None: ...

    def overwrite(self, document: Path, text: str) -> None: ...


def env_path(var_name: str, default: str) -> Path:
    return Path(os.getenv(var_name, default))


def env_extensions(var_name: str, default: str) -> list[str]:
    raw = os.getenv(var_name, default)
    return [_normalize_extension(ext) for ext in raw.split(",") if ext.strip()]


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    return extension if extension.startswith(".") else f".{extension}"


def backup_path(document: Path) -> Path:
    return Path(f"{document}{BACKUP_SUFFIX}")


class FilesystemStore:
    """Document store backed by a directory tree of text files.

    Files and directories whose names start with a dot are not listed.
    """

    def __init__(
        self,
        root: Path,
        extensions: Sequence[str] = (".md",),
        *,
        encoding: str = "utf-8",
    ) -> None:
        self.root = root
        self.extensions = {_normalize_extension(ext) for ext in extensions}
        self.encoding = encoding

    def list_documents(self) -> List[Path]:
        if not self.root.is_dir():
            raise NotADirectoryError(f"Document root is not a directory: {self.root}")

        LOGGER.debug("Listing %s documents under %s", sorted(self.extensions), self.root)
        return sorted(
            path
            for path in self.root.rglob("*")
            if path.is_file()
            and path.suffix.lower() in self.extensions
            and path.suffix.lower() != BACKUP_SUFFIX
            and not _is_hidden(path.relative_to(self.root))
        )

    def read(self, document: Path) -> str:
        try:
            with document.open("r", encoding=self.encoding, newline="") as infile:
                return infile.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(document) from exc

    def create(self, path: Path, text: str) -> None:
        # exclusive mode: an existing file is never replaced
        created = False
        try:
            with path.open("x", encoding=self.encoding, newline="") as outfile:
                created = True
                outfile.write(text)
        except (OSError, UnicodeEncodeError) as exc:
            if created:
                path.unlink(missing_ok=True)
            raise CreateError(path) from exc

    def overwrite(self, document: Path, text: str) -> None:
        # the document is only replaced once the new content is fully on disk
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                newline="",
                dir=document.parent,
                prefix=f".{document.name}.",
                suffix=".tmp",
                delete=False,
            ) as outfile:
                temp_path = Path(outfile.name)
                outfile.write(text)
            shutil.copymode(document, temp_path)
            os.replace(temp_path, document)
        except (OSError, UnicodeEncodeError) as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise WriteError(document) from exc


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)
