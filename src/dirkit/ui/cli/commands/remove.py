"""CLI command for file, empty-directory and recursive removal."""

from __future__ import annotations

import os
from typing import final

from rich.markup import escape

from dirkit.features.tree import remove_directory_recurse
from dirkit.platform.filesystem import directory_exists, remove_directory, remove_file
from dirkit.platform.logging import logger
from dirkit.ui.cli.args.options import RemoveArgs
from dirkit.ui.cli.commands.executor import CommandExecutor


@final
class RemoveCommand(CommandExecutor[RemoveArgs]):
    """Remove a path, refusing non-empty directories unless ``--recursive``."""

    def execute(self) -> int:
        target = str(self.args.path)

        # Symbolic links are unlinked rather than followed, even when dangling.
        if directory_exists(target) and not os.path.islink(target):
            removed = remove_directory_recurse(target) if self.args.recursive else remove_directory(target)
            if not removed and not self.args.recursive:
                logger.error("Directory is not empty or cannot be removed (use -r): %s", target)
                return 1
        elif os.path.lexists(target):
            removed = remove_file(target)
        else:
            logger.error("Path does not exist: %s", target)
            return 1

        if not removed:
            logger.error("Failed to remove: %s", target)
            return 1

        self.say(f"[green]Removed:[/green] {escape(target)}")
        return 0
