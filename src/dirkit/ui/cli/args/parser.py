"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from dirkit.config.config import Config, ConfigError
from dirkit.config.settings import console_level
from dirkit.platform.logging import logger, setup_logger
from dirkit.ui.cli.args.options import (
    CLIArgs,
    ExistsArgs,
    InitConfigArgs,
    ListArgs,
    MakeDirectoryArgs,
    RemoveArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="dirkit",
            description="dirkit - list, create and remove directories the same way on every platform.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        list_parser = subparsers.add_parser("ls", help="List the entries of a directory")
        _ = list_parser.add_argument("path", type=str, help="Directory to list", metavar="PATH")
        type_filter = list_parser.add_mutually_exclusive_group()
        _ = type_filter.add_argument(
            "--dirs-only",
            action="store_true",
            help="Show only subdirectories",
        )
        _ = type_filter.add_argument(
            "--files-only",
            action="store_true",
            help="Show only non-directory entries",
        )
        ArgumentParser._add_verbosity_flags(list_parser)

        mkdir_parser = subparsers.add_parser("mkdir", help="Create a directory")
        _ = mkdir_parser.add_argument("path", type=str, help="Directory to create", metavar="PATH")
        _ = mkdir_parser.add_argument(
            "-p",
            "--parents",
            action="store_true",
            help="Create missing parent directories as needed",
        )
        ArgumentParser._add_verbosity_flags(mkdir_parser)

        rm_parser = subparsers.add_parser("rm", help="Remove a file or directory")
        _ = rm_parser.add_argument("path", type=str, help="File or directory to remove", metavar="PATH")
        _ = rm_parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Remove a directory and everything inside it",
        )
        ArgumentParser._add_verbosity_flags(rm_parser)

        exists_parser = subparsers.add_parser("exists", help="Check whether a path exists")
        _ = exists_parser.add_argument("path", type=str, help="Path to check", metavar="PATH")
        _ = exists_parser.add_argument(
            "--dir",
            dest="directory",
            action="store_true",
            help="Require the path to be a readable directory",
        )
        ArgumentParser._add_verbosity_flags(exists_parser)

        init_parser = subparsers.add_parser("init-config", help="Write a default configuration file")
        _ = init_parser.add_argument(
            "--path",
            type=str,
            help="Destination file (defaults to the portable config location)",
            metavar="FILE",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )
        ArgumentParser._add_verbosity_flags(init_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = console_level()

        # Console first so configuration errors are visible.
        _ = setup_logger(console_level=log_level)
        try:
            configuration = Config.load()
        except ConfigError as exc:
            # init-config --force must still be able to replace a broken file.
            logger.error("Invalid configuration, file logging disabled: %s", exc)
            configuration = None
        if configuration is not None and configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command
        path = Path(parsed_args.path) if parsed_args.path else None

        if command == "ls":
            assert path is not None
            return ListArgs(
                command="ls",
                path=path,
                dirs_only=parsed_args.dirs_only,
                files_only=parsed_args.files_only,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "mkdir":
            assert path is not None
            return MakeDirectoryArgs(
                command="mkdir",
                path=path,
                parents=parsed_args.parents,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "rm":
            assert path is not None
            return RemoveArgs(
                command="rm",
                path=path,
                recursive=parsed_args.recursive,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "exists":
            assert path is not None
            return ExistsArgs(
                command="exists",
                path=path,
                directory=parsed_args.directory,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                path=path,
                force=parsed_args.force,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        """Attach the shared --verbose/--quiet switches."""

        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed filesystem events",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
