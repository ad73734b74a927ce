"""Whole-file reads and writes for workspace files."""

from __future__ import annotations

from pathlib import Path

from texcaller.errors import FileTransferError


def read_file(path: Path) -> bytes:
    """Read the complete content of path."""

    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileTransferError(f'Unable to read file "{path}": {exc.strerror or exc}.') from exc


def read_optional_file(path: Path) -> bytes | None:
    """Read path, returning None when it does not exist."""

    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise FileTransferError(f'Unable to read file "{path}": {exc.strerror or exc}.') from exc


def write_file(path: Path, data: bytes) -> None:
    """Create or overwrite path with data."""

    try:
        path.write_bytes(data)
    except OSError as exc:
        raise FileTransferError(
            f'Unable to write {len(data)} bytes to file "{path}": {exc.strerror or exc}.'
        ) from exc
