"""Runtime settings for the SCV hosts.

Settings come from built-in defaults, then an optional YAML file, then
``SCV_*`` environment variables, each layer overriding the one before.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_STATE_PATH = Path.home() / ".scv" / "registry.json"
DEFAULT_OWNER = "scv.service"


class ConfigError(ValueError):
    """Raised when a settings file cannot be used."""


_ENV_KEYS = {
    "state_path": "SCV_STATE_PATH",
    "owner": "SCV_OWNER",
    "log_level": "SCV_LOG_LEVEL",
}


@dataclass
class Settings:
    state_path: Path = field(default_factory=lambda: DEFAULT_STATE_PATH)
    owner: str = DEFAULT_OWNER  # the service's own identity
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.state_path = Path(self.state_path).expanduser()
        self.log_level = self.log_level.upper()


def load_settings(config_file: Optional[str | Path] = None) -> Settings:
    """Build settings from an optional YAML file and the environment."""
    values: dict = {}

    config_file = config_file or os.environ.get("SCV_CONFIG")
    if config_file:
        with open(config_file) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {config_file} must contain a mapping of settings"
            )
        values.update({k: v for k, v in data.items() if k in _ENV_KEYS})

    for key, env_name in _ENV_KEYS.items():
        if os.environ.get(env_name):
            values[key] = os.environ[env_name]

    return Settings(**values)
