# Where: dirkit.shared.__init__
# What: Provide a concise import surface for shared path helpers.
# Why: Keep string-only helpers importable without touching the filesystem layer.

"""Shared cross-cutting utilities exposed at the package level."""

from .path_utils import extract_file_name, last_separator_index, os_path_separator

__all__ = ["extract_file_name", "last_separator_index", "os_path_separator"]
