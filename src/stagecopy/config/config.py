"""Configuration management for stagecopy."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from stagecopy.config.file_ops import write_text_file
from stagecopy.config.paths import default_config_path
from stagecopy.platform.logging import logger


FEEDBACK_ITERATIONS_DEFAULT = 2
FEEDBACK_DELAY_DEFAULT = 0.08
CURSOR_POLL_ATTEMPTS_DEFAULT = 30
CURSOR_POLL_INTERVAL_DEFAULT = 0.1


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Highlight pulse shown for entries touched by copy/paste
    feedback_enabled: bool = True
    feedback_iterations: int = FEEDBACK_ITERATIONS_DEFAULT
    feedback_delay: float = FEEDBACK_DELAY_DEFAULT

    # Cursor placement after paste
    cursor_poll_attempts: int = CURSOR_POLL_ATTEMPTS_DEFAULT
    cursor_poll_interval: float = CURSOR_POLL_INTERVAL_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# stagecopy Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/stagecopy.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Highlight pulse for copied/pasted entries (cosmetic only)")
        lines.append(f"feedback_enabled = {self._format_toml_value(config['feedback_enabled'])}")
        lines.append(
            f"feedback_iterations = {self._format_toml_value(config['feedback_iterations'])}"
        )
        lines.append(f"feedback_delay = {self._format_toml_value(config['feedback_delay'])}")
        lines.append("")

        lines.append("# Cursor placement after paste")
        lines.append("# The listing is polled until the pasted entry shows up, then given up silently")
        lines.append(
            f"cursor_poll_attempts = {self._format_toml_value(config['cursor_poll_attempts'])}"
        )
        lines.append(
            f"cursor_poll_interval = {self._format_toml_value(config['cursor_poll_interval'])}"
        )
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
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one when absent.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    raw = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(raw) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {key: value for key, value in raw.items() if key in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
