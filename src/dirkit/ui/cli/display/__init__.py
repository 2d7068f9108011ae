"""Rich renderers for CLI output."""

from dirkit.ui.cli.display.listing import ListingDisplay

__all__ = ["ListingDisplay"]
