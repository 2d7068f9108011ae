"""User interfaces for dirkit."""
