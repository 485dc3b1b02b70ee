"""Engine configuration.

Configuration can be loaded from YAML files and is validated before use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from fsmspec.utils.logging import FORMATS, LEVELS, configure_logging
from fsmspec.utils.result import ConfigError, Err, Ok, Result

# Environment variable naming a YAML config file
CONFIG_ENV_VAR = "FSMSPEC_CONFIG"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "info"
    format: str = "json"


@dataclass
class BusConfig:
    """Notification bus settings."""

    # Handlers per channel before a warning is logged, 0 disables
    max_listeners: int = 10


@dataclass
class EngineConfig:
    """Complete engine configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    bus: BusConfig = field(default_factory=BusConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> Result["EngineConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message=f"Top level must be a mapping, got {type(data).__name__}",
            ))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["EngineConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        try:
            logging_data = data.get("logging") or {}
            logging_config = LoggingConfig(
                level=str(logging_data.get("level", "info")),
                format=str(logging_data.get("format", "json")),
            )

            bus_data = data.get("bus") or {}
            bus = BusConfig(
                max_listeners=int(bus_data.get("max_listeners", 10)),
            )
        except (AttributeError, TypeError, ValueError) as e:
            return Err(ConfigError(
                field="unknown",
                message=f"Failed to parse configuration: {e}",
            ))

        config = cls(logging=logging_config, bus=bus)

        validation_result = config.validate()
        if validation_result.is_err():
            return Err(validation_result.unwrap_err())

        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.logging.level.lower() not in LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Must be one of {sorted(LEVELS)}, got {self.logging.level!r}",
            ))
        if self.logging.format not in FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be one of {list(FORMATS)}, got {self.logging.format!r}",
            ))

        if self.bus.max_listeners < 0:
            return Err(ConfigError(
                field="bus.max_listeners",
                message=f"Must be at least 0, got {self.bus.max_listeners}",
            ))

        return Ok(None)

    def apply_logging(self, stream: Any = None) -> None:
        """Configure structured logging from the ``logging`` section."""
        configure_logging(
            level=self.logging.level,
            format_type=self.logging.format,
            stream=stream,
        )


def load_config(path: Optional[Path] = None) -> Result[EngineConfig, ConfigError]:
    """
    Load configuration from the standard location.

    Reads ``path`` if given, else the file named by FSMSPEC_CONFIG, else
    returns the defaults.

    Args:
        path: Optional YAML configuration file

    Returns:
        Result with loaded config or error
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return Ok(EngineConfig())
        path = Path(env_path)

    return EngineConfig.from_yaml(path)
