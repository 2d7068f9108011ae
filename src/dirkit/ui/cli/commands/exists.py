"""CLI command reporting whether a path exists."""

from __future__ import annotations

from typing import final

from dirkit.platform.filesystem import directory_exists, file_exists
from dirkit.ui.cli.args.options import ExistsArgs
from dirkit.ui.cli.commands.executor import CommandExecutor


@final
class ExistsCommand(CommandExecutor[ExistsArgs]):
    """Print ``true``/``false`` and mirror it in the exit code."""

    def execute(self) -> int:
        check = directory_exists if self.args.directory else file_exists
        present = check(self.args.path)
        self.say("true" if present else "false")
        return 0 if present else 1
