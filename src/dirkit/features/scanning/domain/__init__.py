"""Domain records for directory scanning."""
