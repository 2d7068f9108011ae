"""CLI command that lists a directory through the scan iterator."""

from __future__ import annotations

from typing import final

from dirkit.features.scanning import DirectoryContainer, DirectoryEntry
from dirkit.platform.filesystem import directory_exists
from dirkit.platform.logging import logger
from dirkit.ui.cli.args.options import ListArgs
from dirkit.ui.cli.commands.executor import CommandExecutor
from dirkit.ui.cli.display.listing import ListingDisplay


@final
class ListCommand(CommandExecutor[ListArgs]):
    """Print the entries of one directory in scan order."""

    def execute(self) -> int:
        if not directory_exists(self.args.path):
            logger.error("Directory does not exist or cannot be read: %s", self.args.path)
            return 1

        entries = [entry for entry in DirectoryContainer(str(self.args.path)) if self._wanted(entry)]
        if not self.args.quiet:
            ListingDisplay(self.console).show(str(self.args.path), entries)
        return 0

    def _wanted(self, entry: DirectoryEntry) -> bool:
        if entry.is_special():
            return False
        if self.args.dirs_only:
            return entry.is_directory()
        if self.args.files_only:
            return not entry.is_directory()
        return True
