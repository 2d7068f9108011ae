"""Public surface for the directory scanning feature."""

from .domain.models import DirectoryEntry, ScanState, ScanStateError
from .usecases.iterator import DirectoryContainer, DirectoryIterator
from .usecases.ports import DirectoryScanner

__all__ = [
    "DirectoryContainer",
    "DirectoryEntry",
    "DirectoryIterator",
    "DirectoryScanner",
    "ScanState",
    "ScanStateError",
]
