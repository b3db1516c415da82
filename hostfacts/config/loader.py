"""
hostfacts Config - Loading.

Priority:
1. Environment variables (HOSTFACTS_*)
2. Config file ($HOSTFACTS_CONFIG or ~/.hostfacts/config.yaml)
3. Defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from hostfacts.config.models import Config
from hostfacts.core.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".hostfacts" / "config.yaml"

# env var -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "HOSTFACTS_ROOT": ("general", "root"),
    "HOSTFACTS_LOG_LEVEL": ("logging", "console_level"),
    "HOSTFACTS_LOG_FILE": ("logging", "log_file"),
}

_cached_config: Config | None = None


def config_path() -> Path:
    """Return the config file location."""
    env_path = os.environ.get("HOSTFACTS_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", {"path": str(path)}) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", {"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            {"path": str(path)},
        )
    return data


def load_config(path: Path | None = None) -> Config:
    """
    Load configuration from file and environment.

    Args:
        path: Config file (default: see config_path()). A missing file is not
            an error.

    Raises:
        ConfigError: If the file is unreadable or does not validate.
    """
    path = path or config_path()
    data: dict[str, Any] = {}

    if path.exists():
        logger.debug(f"Loading config from {path}")
        data = _read_yaml(path)

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ConfigError(
                    f"Config section '{section}' must be a mapping", {"path": str(path)}
                )
            data[section] = {**section_data, key: value}

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", {"path": str(path)}) from e


def get_config() -> Config:
    """Get the current configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def set_config(config: Config) -> None:
    """Replace the cached configuration."""
    global _cached_config
    _cached_config = config


def reset_config() -> None:
    """Reset the cached configuration."""
    global _cached_config
    _cached_config = None
