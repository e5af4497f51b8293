"""Configuration management for the Taskly application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.taskly.yaml"
DEFAULT_TASKS_FILE = "~/.taskly-tasks.json"


@dataclass
class ConfigModel:
    """Settings resolved once per invocation and passed to the commands."""

    # Where the task list lives
    tasks_file: str = DEFAULT_TASKS_FILE

    # Seconds the init command pauses before reporting
    init_delay: float = 1.0

    # Logging and output
    log_level: str = "WARNING"
    no_color: bool = False

    def __post_init__(self):
        self.tasks_file = os.path.expanduser(str(self.tasks_file))
        self.init_delay = max(0.0, float(self.init_delay))
        self.log_level = str(self.log_level).upper()

    @property
    def tasks_path(self) -> Path:
        return Path(self.tasks_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "tasks_file": self.tasks_file,
            "init_delay": self.init_delay,
            "log_level": self.log_level,
            "no_color": self.no_color,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML.

        Unknown keys are skipped so that older binaries can read newer files.
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.debug("Ignoring unknown config key: %s", key)

        return cls(**{k: v for k, v in data.items() if k in known})


def get_config_path(config_path: Optional[Path] = None) -> Path:
    """Return the config file path, defaulting to ``~/.taskly.yaml``."""
    if config_path is None:
        return Path(os.path.expanduser(DEFAULT_CONFIG_PATH))
    return Path(config_path)


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults.

    A missing file is not an error and nothing is written. A file that
    cannot be read or parsed is logged and the defaults are used.
    """
    config_path = get_config_path(config_path)

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ConfigModel()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning("Failed to load config from %s: %s", config_path, e)
        return ConfigModel()

    logger.debug("Loaded configuration from %s", config_path)
    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    config_path = get_config_path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.debug("Configuration saved to %s", config_path)
