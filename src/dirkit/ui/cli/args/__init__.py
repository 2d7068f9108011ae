"""Command line argument handling package."""

from dirkit.ui.cli.args.options import (
    CLIArgs,
    ExistsArgs,
    InitConfigArgs,
    ListArgs,
    MakeDirectoryArgs,
    RemoveArgs,
)
from dirkit.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ExistsArgs",
    "InitConfigArgs",
    "ListArgs",
    "MakeDirectoryArgs",
    "RemoveArgs",
]
