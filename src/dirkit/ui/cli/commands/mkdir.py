"""CLI command for single-level and recursive directory creation."""

from __future__ import annotations

from typing import final

from rich.markup import escape

from dirkit.features.tree import create_directory_recurse
from dirkit.platform.filesystem import create_directory
from dirkit.platform.logging import logger
from dirkit.ui.cli.args.options import MakeDirectoryArgs
from dirkit.ui.cli.commands.executor import CommandExecutor


@final
class MakeDirectoryCommand(CommandExecutor[MakeDirectoryArgs]):
    """Create a directory, optionally with its missing parents."""

    def execute(self) -> int:
        target = str(self.args.path)
        created = create_directory_recurse(target) if self.args.parents else create_directory(target)
        if not created:
            logger.error("Failed to create directory: %s", target)
            return 1

        self.say(f"[green]Directory ready:[/green] {escape(target)}")
        return 0
