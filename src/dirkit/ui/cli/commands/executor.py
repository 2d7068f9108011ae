"""Where: src/dirkit/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Keep console handling and the exit-code contract identical across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rich.console import Console

from dirkit.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    console: Console

    def __init__(self, args: ArgsT, *, console: Console | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            console: Rich console for user-facing output.
        """
        self.args = args
        self.console = console or Console()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass

    def say(self, message: str) -> None:
        """Print ``message`` unless the user asked for quiet output."""

        if not self.args.quiet:
            self.console.print(message)
