"""Data structures that describe a directory scan and its entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

SPECIAL_ENTRY_NAMES: Final[frozenset[str]] = frozenset({".", ".."})


class ScanState(str, Enum):
    """Lifecycle of a directory iterator; ``DONE`` is terminal."""

    NOT_STARTED = "not_started"
    STARTED = "started"
    DONE = "done"


class ScanStateError(RuntimeError):
    """Raised when an iterator method is called in a state that does not allow it."""


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Snapshot of one record produced by a directory scan.

    The values are copied out of the OS record when the iterator stages it,
    so an entry stays valid after the iterator advances or closes.
    """

    entry_name: str
    directory: bool

    def name(self) -> str:
        """Return the bare entry name without any path prefix."""

        return self.entry_name

    def is_directory(self) -> bool:
        """Return the reported directory flag; symbolic links are not followed."""

        return self.directory

    def is_special(self) -> bool:
        """Return True for the ``.`` and ``..`` pseudo entries."""

        return self.entry_name in SPECIAL_ENTRY_NAMES
