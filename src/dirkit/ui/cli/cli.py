"""Command line interface for dirkit."""

from typing import Any, final

from dirkit.platform.logging import logger
from dirkit.ui.cli.args import ArgumentParser
from dirkit.ui.cli.args.options import (
    CLIArgs,
    ExistsArgs,
    InitConfigArgs,
    ListArgs,
    MakeDirectoryArgs,
    RemoveArgs,
)
from dirkit.ui.cli.commands import (
    CommandExecutor,
    ExistsCommand,
    InitConfigCommand,
    ListCommand,
    MakeDirectoryCommand,
    RemoveCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            return CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[Any]:
        """Return the executor matching the parsed arguments."""

        if isinstance(args, ListArgs):
            return ListCommand(args)
        if isinstance(args, MakeDirectoryArgs):
            return MakeDirectoryCommand(args)
        if isinstance(args, RemoveArgs):
            return RemoveCommand(args)
        if isinstance(args, ExistsArgs):
            return ExistsCommand(args)
        assert isinstance(args, InitConfigArgs)
        return InitConfigCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
