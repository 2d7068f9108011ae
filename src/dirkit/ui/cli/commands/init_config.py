"""CLI command that writes a default configuration file."""

from __future__ import annotations

from typing import final

from rich.markup import escape

from dirkit.config.config import Config
from dirkit.config.paths import default_config_path
from dirkit.platform.logging import logger
from dirkit.ui.cli.args.options import InitConfigArgs
from dirkit.ui.cli.commands.executor import CommandExecutor


@final
class InitConfigCommand(CommandExecutor[InitConfigArgs]):
    """Render the default ``Config`` to TOML."""

    def execute(self) -> int:
        target = self.args.path if self.args.path is not None else default_config_path()
        if target.exists() and not self.args.force:
            logger.error("Configuration already exists (use --force to overwrite): %s", target)
            return 1

        written = Config().save(target)
        self.say(f"[green]Configuration written:[/green] {escape(str(written))}")
        return 0
