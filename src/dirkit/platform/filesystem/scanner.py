"""Native directory scanner backed by ``os.scandir``.

``os.scandir`` wraps ``opendir``/``readdir`` on POSIX and
``FindFirstFileW``/``FindNextFileW`` on Windows, so a single implementation
covers both platforms. It never reports the ``.`` and ``..`` entries.
"""

from __future__ import annotations

import os
from typing import Any, final

from dirkit.platform.logging import logger


@final
class ScandirScanner:
    """Open/next/close scan primitives over the running platform's directory API."""

    def open(self, path: str) -> Any | None:
        """Open a scan on ``path``; None when the directory cannot be read."""

        try:
            return os.scandir(path)
        except (OSError, ValueError) as exc:
            # ValueError: the name holds an embedded NUL.
            reason = exc.strerror if isinstance(exc, OSError) else str(exc)
            logger.debug(
                "Cannot open scan on %s: %s",
                path,
                reason,
                extra={"fs_event": "scan.open.failed", "path": path, "error_message": reason},
            )
            return None

    def next(self, handle: Any) -> os.DirEntry[str] | None:
        """Return the next raw record, or None once the scan is exhausted."""

        try:
            return next(handle)
        except StopIteration:
            return None
        except OSError as exc:
            logger.warning(
                "Directory scan stopped early: %s",
                exc,
                extra={"fs_event": "scan.read.failed", "path": exc.filename, "error_message": exc.strerror},
            )
            return None

    def close(self, handle: Any) -> None:
        handle.close()

    def is_directory(self, record: os.DirEntry[str]) -> bool:
        # Reported type only; symbolic links are not followed.
        try:
            return record.is_dir(follow_symlinks=False)
        except OSError:
            return False

    def name(self, record: os.DirEntry[str]) -> str:
        return record.name


__all__ = ["ScandirScanner"]
