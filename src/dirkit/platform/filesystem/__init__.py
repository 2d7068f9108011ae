"""Native filesystem access: single-call primitives and the scandir scanner."""

from .primitives import (
    create_directory,
    directory_exists,
    file_exists,
    remove_directory,
    remove_file,
)
from .scanner import ScandirScanner

__all__ = [
    "ScandirScanner",
    "create_directory",
    "directory_exists",
    "file_exists",
    "remove_directory",
    "remove_file",
]
