"""Ports for directory scanning.

Where: features/scanning/usecases.
What: The capability interface a platform scanner must provide.
Why: Keep the iterator and the recursive algorithms free of platform-specific calls.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DirectoryScanner(Protocol):
    """Open, step through and close a native directory enumeration."""

    def open(self, path: str) -> Any | None:
        """Open a scan on ``path``; return None when it cannot be opened."""
        ...

    def next(self, handle: Any) -> Any | None:
        """Return the next raw record, or None when the scan is exhausted."""
        ...

    def close(self, handle: Any) -> None:
        """Release a handle returned by ``open``."""
        ...

    def is_directory(self, record: Any) -> bool:
        """Return the record's reported directory flag without following links."""
        ...

    def name(self, record: Any) -> str:
        """Return the record's bare name."""
        ...
