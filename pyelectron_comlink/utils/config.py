"""
PyElectron Comlink Configuration

This module provides the adapter configuration with JSON-only persistence
and environment overrides layered on top of secure defaults.
"""

import json
import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pyelectron_comlink.utils.errors import ConfigError, handle_exception
from pyelectron_comlink.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PREFIX = "electron-comlink--"

ENV_OVERRIDES = {
    "PYELECTRON_COMLINK_PREFIX": "prefix",
    "PYELECTRON_COMLINK_MARKER": "platform_marker",
    "PYELECTRON_COMLINK_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class AdapterConfig:
    """Configuration for a message adapter."""

    prefix: str = DEFAULT_PREFIX
    message_channel: str = "message"
    platform_marker: str = "Electron"
    host_window_types: Tuple[str, ...] = ("BrowserWindow",)
    content_attributes: Tuple[str, ...] = ("web_contents", "webContents")
    capability_name: str = "MessageChannel"
    log_level: str = "INFO"

    @property
    def outbound_channel(self) -> str:
        """Transport channel every outbound message is sent on."""
        return self.prefix + self.message_channel

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON serializable dictionary."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AdapterConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            data: Mapping of field names to values; sequence fields accept
                lists of strings

        Returns:
            AdapterConfig

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                details={'unknown_keys': unknown}
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(getattr(cls, key), tuple):
                if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(
                        f"Configuration value '{key}' must be a list of strings",
                        details={'key': key, 'value_type': type(value).__name__}
                    )
                values[key] = tuple(value)
            else:
                if not isinstance(value, str):
                    raise ConfigError(
                        f"Configuration value '{key}' must be a string",
                        details={'key': key, 'value_type': type(value).__name__}
                    )
                values[key] = value

        config = cls(**values)
        config.validate()
        return config

    def validate(self):
        """Reject configurations that cannot frame or detect anything."""
        if not self.prefix:
            raise ConfigError("Channel prefix must not be empty")
        if not self.message_channel:
            raise ConfigError("Message channel name must not be empty")
        if not self.platform_marker:
            raise ConfigError("Platform marker must not be empty")
        if not self.host_window_types:
            raise ConfigError("At least one host window type name is required")
        if not self.content_attributes:
            raise ConfigError("At least one content channel attribute is required")


@handle_exception
def _read_config_file(config_file: Path) -> Dict[str, Any]:
    """Load raw configuration from a JSON file."""
    if not config_file.exists():
        raise ConfigError(
            f"Config file does not exist: {config_file}",
            details={'config_file': str(config_file)}
        )

    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise ConfigError(
            f"Failed to load configuration from {config_file}: {str(e)}",
            details={'config_file': str(config_file), 'error': str(e)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration root must be an object: {config_file}",
            details={'config_file': str(config_file)}
        )

    logger.debug(f"Loaded configuration from {config_file}")
    return data


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None
) -> AdapterConfig:
    """
    Load adapter configuration.

    Defaults are overlaid with the JSON file (if given) and then with
    PYELECTRON_COMLINK_* environment variables.

    Args:
        config_file: Optional path to a JSON configuration file
        env: Environment mapping, defaults to os.environ

    Returns:
        AdapterConfig
    """
    data: Dict[str, Any] = {}

    if config_file is not None:
        data.update(_read_config_file(Path(config_file)))

    env = os.environ if env is None else env
    for variable, key in ENV_OVERRIDES.items():
        if variable in env:
            data[key] = env[variable]
            logger.debug(f"Configuration override from {variable}")

    return AdapterConfig.from_dict(data)


def save_config(config: AdapterConfig, config_file: Union[str, Path]):
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration to persist
        config_file: Destination path
    """
    config_path = Path(config_file)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temporary file first
        temp_file = config_path.with_suffix('.tmp')
        with open(temp_file, 'w') as f:
            json.dump(config.to_dict(), f, indent=2, sort_keys=True)

        temp_file.replace(config_path)
        logger.debug(f"Saved configuration to {config_path}")

    except (IOError, OSError) as e:
        raise ConfigError(
            f"Failed to save configuration to {config_path}: {str(e)}",
            details={'config_file': str(config_path), 'error': str(e)}
        ) from e
