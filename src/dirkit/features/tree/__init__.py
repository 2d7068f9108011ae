"""Public surface for recursive directory-tree operations."""

from .usecases.create import create_directory_recurse
from .usecases.remove import remove_directory_recurse

__all__ = ["create_directory_recurse", "remove_directory_recurse"]
