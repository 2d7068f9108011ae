"""Configuration management for dirkit."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from dirkit.config.file_ops import write_text_file
from dirkit.config.paths import default_config_path, default_log_file
from dirkit.platform.logging import logger


DIRECTORY_MODE_DEFAULT: Final[int] = 0o700
CONSOLE_LEVEL_DEFAULT: Final[str] = "INFO"
VALID_CONSOLE_LEVELS: Final[tuple[str, ...]] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when the configuration file cannot be parsed or holds invalid values."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Console verbosity used by the CLI when neither --verbose nor --quiet is given
    console_level: str = CONSOLE_LEVEL_DEFAULT

    # Permission bits passed to mkdir for newly created directories
    directory_mode: int = DIRECTORY_MODE_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert path strings and validate scalar settings.

        Raises:
            ConfigError: If ``console_level`` or ``directory_mode`` is invalid.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        level = str(self.console_level).strip().upper()
        if level not in VALID_CONSOLE_LEVELS:
            valid = ", ".join(VALID_CONSOLE_LEVELS)
            raise ConfigError(f"Unsupported console_level '{self.console_level}'. Valid options: {valid}")
        self.console_level = level

        mode = self.directory_mode
        if isinstance(mode, bool) or not isinstance(mode, int) or not 0 <= mode <= 0o7777:
            raise ConfigError(f"directory_mode must be an integer between 0 and 0o7777, got {mode!r}")

    def save(self, path: Path | None = None) -> Path:
        """Save configuration as commented TOML.

        Args:
            path: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path if path is not None else default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# dirkit configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Rotating file log written alongside console output")
        lines.append(f'# Example: log_file = "{default_log_file()}"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: CRITICAL, ERROR, WARNING, INFO or DEBUG")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        lines.append("# Permission bits for directories created by dirkit")
        lines.append(f"directory_mode = 0o{config['directory_mode']:o}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written implicitly.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = path.expanduser().resolve() if path is not None else default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Cannot read configuration {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance
