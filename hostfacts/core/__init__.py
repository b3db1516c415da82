"""
hostfacts Core - Errors and interfaces.
"""

from hostfacts.core.exceptions import (
    ConfigError,
    FactReadError,
    HostFactsError,
    OSReleaseFormatError,
)
from hostfacts.core.protocols import FileSystem

__all__ = [
    "ConfigError",
    "FactReadError",
    "FileSystem",
    "HostFactsError",
    "OSReleaseFormatError",
]
