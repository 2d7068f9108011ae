"""
Summary: Recursive directory removal driven by the scan iterator.
Why: Delete whole trees bottom-up and stop at the first entry that cannot be removed.
"""

from __future__ import annotations

import os

from dirkit.features.scanning import DirectoryContainer, DirectoryScanner
from dirkit.platform.filesystem import remove_directory, remove_file
from dirkit.platform.filesystem.primitives import StrPath
from dirkit.platform.logging import logger


def remove_directory_recurse(path: StrPath, *, scanner: DirectoryScanner | None = None) -> bool:
    """Delete ``path`` and everything below it.

    Entries are removed children-first. The first failure aborts the whole
    call without touching unvisited siblings and without rollback.

    Args:
        path: Directory to delete.
        scanner: Scanner backend; the native ``os.scandir`` scanner when omitted.

    Returns:
        bool: True only if the scan opened, every entry was removed and
        ``path`` itself was removed.
    """
    directory = os.fspath(path)

    with DirectoryContainer(directory).iterator(scanner) as entries:
        entries.start()
        if not entries.opened:
            return False

        while not entries.is_done():
            entry = entries.current()
            if entry.is_special():
                entries.advance()
                continue

            child = os.path.join(directory, entry.name())
            if entry.is_directory():
                # The nested call reports its own failure.
                if not remove_directory_recurse(child, scanner=scanner):
                    return False
            elif not remove_file(child):
                _log_abort(child)
                return False
            entries.advance()

    if not remove_directory(directory):
        _log_abort(directory)
        return False
    return True


def _log_abort(path: str) -> None:
    logger.warning(
        "Recursive remove stopped at %s",
        path,
        extra={"fs_event": "remove.tree.aborted", "path": path},
    )


__all__ = ["remove_directory_recurse"]
