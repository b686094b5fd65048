"""Whole-file binary reads and writes."""

from __future__ import annotations

from pathlib import Path

from .errors import FileAccessError


def read_binary_file(path: str | Path) -> bytes:
    """Read the entire contents of a binary file.

    Raises:
        FileAccessError: If the file cannot be opened or read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileAccessError(f"Can't open file: {path}") from e


def write_binary_file(path: str | Path, data: bytes) -> None:
    """Write data to a binary file, replacing any existing contents.

    Raises:
        FileAccessError: If the file cannot be opened or written
    """
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise FileAccessError(f"Can't open file: {path}") from e
