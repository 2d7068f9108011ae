"""Where: src/dirkit/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Resolve settings on first use so a broken config file never breaks importing the library.
"""

from __future__ import annotations

import logging

from dirkit.config.config import (
    CONSOLE_LEVEL_DEFAULT,
    DIRECTORY_MODE_DEFAULT,
    Config,
    ConfigError,
)
from dirkit.platform.logging import logger


def _load_config() -> Config | None:
    try:
        return Config.load()
    except ConfigError as exc:
        logger.warning("Ignoring invalid configuration, using defaults: %s", exc)
        return None


def directory_mode() -> int:
    """Permission bits for new directories; the default when the config is unusable."""

    app_config = _load_config()
    return DIRECTORY_MODE_DEFAULT if app_config is None else app_config.directory_mode


def console_level() -> int:
    """Console logging level as a ``logging`` constant."""

    app_config = _load_config()
    level_name = CONSOLE_LEVEL_DEFAULT if app_config is None else app_config.console_level
    return getattr(logging, level_name)


__all__ = ["console_level", "directory_mode"]
