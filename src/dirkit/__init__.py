"""dirkit: cross-platform directory scanning and recursive create/remove helpers."""

from dirkit.features.scanning import (
    DirectoryContainer,
    DirectoryEntry,
    DirectoryIterator,
    DirectoryScanner,
    ScanState,
    ScanStateError,
)
from dirkit.features.tree import create_directory_recurse, remove_directory_recurse
from dirkit.platform.filesystem import (
    ScandirScanner,
    create_directory,
    directory_exists,
    file_exists,
    remove_directory,
    remove_file,
)
from dirkit.shared import extract_file_name, os_path_separator

__all__ = [
    "DirectoryContainer",
    "DirectoryEntry",
    "DirectoryIterator",
    "DirectoryScanner",
    "ScanState",
    "ScanStateError",
    "ScandirScanner",
    "create_directory",
    "create_directory_recurse",
    "directory_exists",
    "extract_file_name",
    "file_exists",
    "os_path_separator",
    "remove_directory",
    "remove_directory_recurse",
    "remove_file",
]
