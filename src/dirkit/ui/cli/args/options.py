"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``ls`` subcommand."""

    command: Literal["ls"]
    path: Path
    dirs_only: bool
    files_only: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MakeDirectoryArgs:
    """Command line arguments for the ``mkdir`` subcommand."""

    command: Literal["mkdir"]
    path: Path
    parents: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RemoveArgs:
    """Command line arguments for the ``rm`` subcommand."""

    command: Literal["rm"]
    path: Path
    recursive: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ExistsArgs:
    """Command line arguments for the ``exists`` subcommand."""

    command: Literal["exists"]
    path: Path
    directory: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool
    verbose: bool
    quiet: bool


CLIArgs = ListArgs | MakeDirectoryArgs | RemoveArgs | ExistsArgs | InitConfigArgs
