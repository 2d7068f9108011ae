"""Recursive directory creation."""

from __future__ import annotations

import os

from dirkit.platform.filesystem import create_directory
from dirkit.platform.filesystem.primitives import StrPath
from dirkit.shared.path_utils import last_separator_index


def create_directory_recurse(path: StrPath, mode: int | None = None) -> bool:
    """Create ``path`` and every missing ancestor, top-down.

    A level that cannot be created does not stop attempts at deeper levels.
    Existing levels are left untouched, so calling this again is a no-op.

    Args:
        path: Directory path using ``/`` (or ``\\`` on Windows) separators.
        mode: Permission bits for new levels; defaults to the configured mode.

    Returns:
        bool: True if ``path`` exists as a directory afterwards.
    """
    directory = os.fspath(path)
    index = last_separator_index(directory)
    if index > 0:
        parent_ok = create_directory_recurse(directory[:index], mode)
        if index == len(directory) - 1:
            # Trailing separator: the prefix already is the full path.
            return parent_ok
    return create_directory(directory, mode)


__all__ = ["create_directory_recurse"]
