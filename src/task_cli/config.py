"""Configuration management for the Task CLI application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"true", "yes", "on", "1"}
FALSE_STRINGS = {"false", "no", "off", "0"}


def _coerce_bool(key: str, value: Any) -> bool:
    """Accept YAML booleans and their quoted spellings ("false", "no", ...)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_STRINGS:
            return True
        if normalized in FALSE_STRINGS:
            return False
    raise ValueError(f"Config key '{key}' must be a boolean, got {value!r}")


def _coerce_str(key: str, value: Any) -> str:
    """Accept strings and plain scalars such as numbers."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"Config key '{key}' must be a string, got {value!r}")


@dataclass
class ConfigModel:
    """Global configuration model for Task CLI."""

    # File paths
    data_dir: str = "~/.task_cli"
    tasks_file: str = "tasks.txt"  # relative to data_dir unless absolute

    # Storage behavior
    persist_extra: bool = True  # False writes the legacy five-field lines
    strict_priority: bool = False

    # Logging
    log_level: str = "WARNING"

    # UI
    no_color: bool = False
    use_emoji: bool = True

    def __post_init__(self):
        """Expand user paths."""
        self.data_dir = os.path.expanduser(self.data_dir)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys.

        Raises:
            ValueError: If the document is not a mapping or a value has the
                wrong type
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            if f.type is bool:
                values[f.name] = _coerce_bool(f.name, raw)
            else:
                values[f.name] = _coerce_str(f.name, raw)

        unknown = sorted(str(key) for key in data if key not in values)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**values)

    def get_tasks_path(self) -> Path:
        """Get the resolved tasks file path."""
        path = Path(os.path.expanduser(self.tasks_file))
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for Task CLI."""

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults."""
        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
                config = ConfigModel()

        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
