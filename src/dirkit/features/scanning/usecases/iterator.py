"""
Summary: Directory container and the start/advance/is_done/current iterator over it.
Why: Give callers one scan protocol whose OS handle is released exactly once on every exit path.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from types import TracebackType
from typing import Any

from dirkit.features.scanning.domain.models import DirectoryEntry, ScanState, ScanStateError
from dirkit.features.scanning.usecases.ports import DirectoryScanner
from dirkit.platform.filesystem import ScandirScanner


@dataclass(slots=True, frozen=True)
class DirectoryContainer:
    """A directory to be scanned; produces independent iterators on demand."""

    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", os.fspath(self.path))

    def iterator(self, scanner: DirectoryScanner | None = None) -> DirectoryIterator:
        """Return a fresh, unstarted iterator over this directory."""

        return DirectoryIterator(self, scanner=scanner)

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(self.iterator())


class DirectoryIterator:
    """Drive a single left-to-right scan of a ``DirectoryContainer``.

    Canonical loop::

        it.start()
        while not it.is_done():
            entry = it.current()
            ...
            it.advance()

    The iterator is also a context manager and a Python iterator; both forms
    release the scan handle when they finish. A handle is closed as soon as
    the scan is exhausted, on ``close()``, or when the iterator is collected.
    Instances are not safe to share across threads.
    """

    def __init__(self, container: DirectoryContainer, scanner: DirectoryScanner | None = None) -> None:
        self._container = container
        self._scanner: DirectoryScanner = scanner if scanner is not None else ScandirScanner()
        self._handle: Any | None = None
        self._current: DirectoryEntry | None = None
        self._state = ScanState.NOT_STARTED
        self._opened = False

    @property
    def container(self) -> DirectoryContainer:
        return self._container

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def opened(self) -> bool:
        """True once ``start()`` has acquired a scan handle, even if the directory was empty."""

        return self._opened

    def start(self) -> None:
        """Open the scan and stage the first entry.

        A directory that cannot be opened moves the iterator straight to
        ``DONE``; this is not reported as an error.

        Raises:
            ScanStateError: If the iterator was already started or closed.
        """
        if self._state is not ScanState.NOT_STARTED:
            raise ScanStateError(f"start() called on an iterator in state {self._state.value}")

        handle = self._scanner.open(self._container.path)
        if handle is None:
            self._state = ScanState.DONE
            return

        self._handle = handle
        self._opened = True
        self._state = ScanState.STARTED
        self._stage_next()

    def advance(self) -> None:
        """Stage the next entry, or finish the scan when none remain."""

        if self._state is not ScanState.STARTED:
            raise ScanStateError(f"advance() called on an iterator in state {self._state.value}")
        self._stage_next()

    def is_done(self) -> bool:
        """Return True once the scan is exhausted, failed to open, or was closed."""

        if self._state is ScanState.NOT_STARTED:
            raise ScanStateError("start() must be called before is_done()")
        return self._state is ScanState.DONE

    def current(self) -> DirectoryEntry:
        """Return the staged entry."""

        if self._state is not ScanState.STARTED or self._current is None:
            raise ScanStateError(f"current() called on an iterator in state {self._state.value}")
        return self._current

    def close(self) -> None:
        """Release the scan handle if one is held; safe to call repeatedly."""

        handle, self._handle = self._handle, None
        self._current = None
        self._state = ScanState.DONE
        if handle is not None:
            self._scanner.close(handle)

    def _stage_next(self) -> None:
        record = self._scanner.next(self._handle)
        if record is None:
            self.close()
            return
        self._current = DirectoryEntry(
            entry_name=self._scanner.name(record),
            directory=self._scanner.is_directory(record),
        )

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[DirectoryEntry]:
        if self._state is ScanState.NOT_STARTED:
            self.start()
        try:
            while not self.is_done():
                yield self.current()
                self.advance()
        finally:
            self.close()

    def __del__(self) -> None:
        if getattr(self, "_handle", None) is not None:
            self.close()


__all__ = ["DirectoryContainer", "DirectoryIterator"]
