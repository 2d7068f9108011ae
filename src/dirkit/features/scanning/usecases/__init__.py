"""Use cases for directory scanning."""
