"""
Summary: Pure string helpers for separators and final path segments.
Why: Let callers split paths the same way on every platform without I/O.
"""

from __future__ import annotations

import os
from typing import Final

_IS_WINDOWS: Final[bool] = os.name == "nt"


def os_path_separator() -> str:
    """Return the path separator of the running platform."""

    return os.sep


def last_separator_index(path: str, *, windows: bool | None = None) -> int:
    """Return the index of the last separator in ``path`` or ``-1``.

    A forward slash always counts. On Windows a backslash is consulted only
    when the path contains no forward slash.

    Args:
        path: Raw path string.
        windows: Override platform detection (mainly for tests).

    Returns:
        int: Index of the separator, ``-1`` when there is none.
    """
    index = path.rfind("/")
    use_windows_rules = _IS_WINDOWS if windows is None else windows
    if index < 0 and use_windows_rules:
        index = path.rfind("\\")
    return index


def extract_file_name(filepath: str, *, windows: bool | None = None) -> str:
    """Return the final segment of ``filepath`` (everything after the last separator)."""

    index = last_separator_index(filepath, windows=windows)
    return filepath[index + 1 :]


__all__ = ["extract_file_name", "last_separator_index", "os_path_separator"]
