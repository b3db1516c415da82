"""
hostfacts Config - Configuration management.
"""

from hostfacts.config.loader import (
    config_path,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from hostfacts.config.models import (
    Config,
    GeneralConfig,
    KernelConfig,
    LoggingConfig,
    OSReleaseConfig,
)

__all__ = [
    "Config",
    "GeneralConfig",
    "KernelConfig",
    "LoggingConfig",
    "OSReleaseConfig",
    "config_path",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
