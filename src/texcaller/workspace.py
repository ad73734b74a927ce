"""Temporary workspace creation and teardown."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from texcaller.config import DestinationFormat, Settings
from texcaller.errors import CleanupError, WorkspaceError
from texcaller.logger import _log_debug, _log_warning
from texcaller.models import Workspace


def _strerror(exc: OSError) -> str:
    return exc.strerror or str(exc)


def create_workspace(
    destination_format: DestinationFormat, settings: Settings | None = None
) -> Workspace:
    """Create a uniquely named directory and return its canonical file paths."""

    settings = settings or Settings.from_env()
    base = settings.temp_root or Path(tempfile.gettempdir())

    try:
        directory = tempfile.mkdtemp(prefix=settings.workspace_prefix, dir=base)
    except OSError as exc:
        raise WorkspaceError(
            f'Unable to create temporary directory in "{base}": {_strerror(exc)}.'
        ) from exc

    _log_debug(f"Created workspace {directory}")
    return Workspace.at(Path(directory), DestinationFormat(destination_format))


def _remove_entries(directory: Path) -> str | None:
    """Remove everything below directory, returning the first error message."""

    first_error: str | None = None
    try:
        entries = list(os.scandir(directory))
    except OSError as exc:
        return f'Unable to read directory entries of "{directory}": {_strerror(exc)}.'

    for entry in entries:
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            if not is_dir:
                os.unlink(path)
        except OSError as exc:
            error = f'Unable to remove file "{path}": {_strerror(exc)}.'
        else:
            error = _remove_tree(path) if is_dir else None
        if error is not None and first_error is None:
            first_error = error
    return first_error


def _remove_tree(directory: Path) -> str | None:
    first_error = _remove_entries(directory)
    try:
        os.rmdir(directory)
    except OSError as exc:
        return first_error or f'Unable to remove directory "{directory}": {_strerror(exc)}.'
    # The directory is gone, so earlier entry errors no longer matter.
    return None


def remove_directory_recursively(directory: Path) -> None:
    """Remove directory like ``rm -r``, continuing past individual failures.

    Raises CleanupError with the first failure only when the directory
    itself could not be removed in the end.
    """

    error = _remove_tree(Path(directory))
    if error is not None:
        _log_warning(error)
        raise CleanupError(error)
    _log_debug(f"Removed workspace {directory}")


@contextmanager
def workspace(
    destination_format: DestinationFormat, settings: Settings | None = None
) -> Iterator[Workspace]:
    """Yield a fresh workspace and remove it on every exit path."""

    current = create_workspace(destination_format, settings)
    try:
        yield current
    finally:
        remove_directory_recursively(current.directory)
