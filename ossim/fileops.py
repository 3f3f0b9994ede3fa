"""File utilities: copy, delete, move, create and save a note."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

NOTES_FILE = "notes.txt"


class FileOperationError(OSError):
    """Raised when a file cannot be opened, created, moved or removed."""


def copy_file(source: PathLike, destination: PathLike) -> None:
    """Copy the bytes of ``source`` into ``destination``, replacing its content."""
    if not os.fspath(source) or not os.fspath(destination):
        raise ValueError("Please enter both filenames")
    try:
        src = open(source, "rb")
    except OSError as exc:
        raise FileOperationError("Error: Cannot open source file") from exc
    with src:
        try:
            dst = open(destination, "wb")
        except OSError as exc:
            raise FileOperationError("Error: Cannot create destination file") from exc
        with dst:
            shutil.copyfileobj(src, dst)


def delete_file(filename: PathLike) -> bool:
    """Remove ``filename``; return False without acting when it is empty."""
    if not os.fspath(filename):
        return False
    try:
        os.unlink(filename)
    except OSError as exc:
        raise FileOperationError(
            f"Failed to delete {os.fspath(filename)}\n{exc.strerror}"
        ) from exc
    return True


def move_file(source: PathLike, destination: PathLike) -> None:
    """Rename ``source`` to ``destination``."""
    if not os.fspath(source) or not os.fspath(destination):
        raise ValueError("Both fields must be filled")
    try:
        os.rename(source, destination)
    except OSError as exc:
        raise FileOperationError(f"Error moving file: {exc.strerror}") from exc


def create_file(filename: PathLike) -> None:
    """Create ``filename`` if it is missing, leaving an existing file untouched."""
    try:
        fd = os.open(filename, os.O_CREAT | os.O_WRONLY, 0o644)
    except OSError as exc:
        raise FileOperationError(
            f"Failed to create file: {os.fspath(filename)}"
        ) from exc
    os.close(fd)


def save_note(text: str, path: PathLike = NOTES_FILE) -> None:
    """Write ``text`` to ``path``, replacing what was there."""
    try:
        Path(path).write_text(text)
    except OSError as exc:
        raise FileOperationError("Error opening file!") from exc