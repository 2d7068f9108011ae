"""Use cases for recursive directory-tree operations."""
