"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and the Rich event handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import FsEventRichHandler

__all__ = [
    "FsEventRichHandler",
    "logger",
    "setup_logger",
]
