"""Command line interface package."""

from dirkit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
