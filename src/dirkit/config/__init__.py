"""Configuration package for dirkit."""
