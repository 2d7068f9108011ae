"""Where: src/dirkit/ui/cli/display/listing.py
What: Render directory entries as a Rich table.
Why: Keep console formatting out of the command classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dirkit.features.scanning import DirectoryEntry


@final
class ListingDisplay:
    """Handles directory listing output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, directory: str, entries: Sequence[DirectoryEntry]) -> None:
        """Print ``entries`` in the order they were scanned.

        Args:
            directory: Directory the entries belong to, used as the table title.
            entries: Entries to render.
        """
        if not entries:
            self.console.print(Text(f"{directory} is empty", style="yellow"))
            return

        table = Table(title=Text(directory), box=box.SIMPLE_HEAD, show_lines=False)
        table.add_column("Name", overflow="fold")
        table.add_column("Type", justify="center")

        directory_count = 0
        for entry in entries:
            if entry.is_directory():
                directory_count += 1
                table.add_row(Text(entry.name(), style="bold cyan"), Text("dir", style="cyan"))
            else:
                table.add_row(Text(entry.name()), Text("file"))

        file_count = len(entries) - directory_count
        table.caption = f"{directory_count} directories, {file_count} files"
        self.console.print(table)
