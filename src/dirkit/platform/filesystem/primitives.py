"""
Summary: Single-call existence checks and create/remove wrappers over the OS.
Why: Turn ordinary filesystem conditions into booleans so callers never handle OSError.
"""

from __future__ import annotations

import os

from dirkit.config.settings import directory_mode
from dirkit.platform.logging import logger

StrPath = str | os.PathLike[str]


def file_exists(path: StrPath) -> bool:
    """Return True when anything exists at ``path``; never raises."""

    try:
        return os.access(path, os.F_OK)
    except (OSError, ValueError):
        return False


def directory_exists(path: StrPath) -> bool:
    """Return True when a directory scan can be opened on ``path``; never raises."""

    try:
        with os.scandir(path):
            return True
    except (OSError, ValueError):
        return False


def create_directory(path: StrPath, mode: int | None = None) -> bool:
    """Create a single directory level.

    Already-existing directories count as success, so repeated calls are
    idempotent.

    Args:
        path: Directory to create. Its parent must already exist.
        mode: Permission bits; defaults to the configured ``directory_mode``.

    Returns:
        bool: True if the directory exists afterwards, False if the OS call failed.
    """
    if directory_exists(path):
        return True

    try:
        os.mkdir(path, directory_mode() if mode is None else mode)
    except FileExistsError:
        # Raced with another creator, or a non-directory occupies the path.
        return directory_exists(path)
    except (OSError, ValueError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) else str(exc)
        logger.debug(
            "Cannot create directory %s: %s",
            path,
            reason,
            extra={"fs_event": "create.directory.failed", "path": os.fspath(path), "error_message": reason},
        )
        return False

    logger.debug("Created directory %s", path, extra={"fs_event": "create.directory", "path": os.fspath(path)})
    return True


def remove_directory(path: StrPath) -> bool:
    """Remove an empty directory; False if it is missing, not empty or removal fails."""

    if not directory_exists(path):
        return False

    try:
        os.rmdir(path)
    except OSError as exc:
        logger.debug(
            "Cannot remove directory %s: %s",
            path,
            exc.strerror,
            extra={"fs_event": "remove.directory.failed", "path": os.fspath(path), "error_message": exc.strerror},
        )
        return False

    logger.debug("Removed directory %s", path, extra={"fs_event": "remove.directory", "path": os.fspath(path)})
    return True


def remove_file(path: StrPath) -> bool:
    """Remove a file; a missing file is treated as success."""

    # A dangling symlink fails the access check but still needs unlinking.
    if not file_exists(path) and not os.path.islink(path):
        return True

    try:
        os.remove(path)
    except OSError as exc:
        logger.debug(
            "Cannot remove file %s: %s",
            path,
            exc.strerror,
            extra={"fs_event": "remove.file.failed", "path": os.fspath(path), "error_message": exc.strerror},
        )
        return False

    logger.debug("Removed file %s", path, extra={"fs_event": "remove.file", "path": os.fspath(path)})
    return True


__all__ = [
    "StrPath",
    "create_directory",
    "directory_exists",
    "file_exists",
    "remove_directory",
    "remove_file",
]
