"""Command execution package for CLI."""

from dirkit.ui.cli.commands.executor import CommandExecutor
from dirkit.ui.cli.commands.exists import ExistsCommand
from dirkit.ui.cli.commands.init_config import InitConfigCommand
from dirkit.ui.cli.commands.listing import ListCommand
from dirkit.ui.cli.commands.mkdir import MakeDirectoryCommand
from dirkit.ui.cli.commands.remove import RemoveCommand

__all__ = [
    "CommandExecutor",
    "ExistsCommand",
    "InitConfigCommand",
    "ListCommand",
    "MakeDirectoryCommand",
    "RemoveCommand",
]
