"""
hostfacts Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from hostfacts.collectors.kernel import DEFAULT_KERNEL_PATHS, kernel_paths
from hostfacts.collectors.os_release import DEFAULT_OS_RELEASE_PATHS

LogLevelName = Literal["trace", "debug", "info", "success", "warning", "error", "critical"]


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


class GeneralConfig(BaseModel):
    """General settings."""

    root: Path | None = Field(
        default=None, description="Read facts below this directory instead of /"
    )


class KernelConfig(BaseModel):
    """Kernel info collector settings."""

    enabled: bool = Field(default_factory=_is_linux, description="Collect kernel info")
    paths: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_KERNEL_PATHS),
        description="Fact key to file path; missing keys keep their default",
    )

    @field_validator("paths")
    @classmethod
    def _merge_paths(cls, value: dict[str, str]) -> dict[str, str]:
        for key, path in value.items():
            if not path.startswith("/"):
                raise ValueError(f"kernel path for {key!r} must be absolute: {path!r}")
        return kernel_paths(value)


class OSReleaseConfig(BaseModel):
    """OS-release collector settings."""

    enabled: bool = Field(default=True, description="Collect os-release")
    strict: bool = Field(default=False, description="Fail on lines without '='")
    candidates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_OS_RELEASE_PATHS),
        description="Paths probed in order; the first existing one wins",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    console_level: LogLevelName = Field(default="warning", description="Console log level")
    file_level: LogLevelName = Field(default="debug", description="File log level")
    log_file: Path | None = Field(default=None, description="Log file path (no file if unset)")
    max_size_mb: int = Field(default=10, ge=1, le=100, description="Max log file size in MB")
    retention_days: int = Field(default=7, ge=1, le=90, description="Log retention in days")

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value


class Config(BaseModel):
    """Root configuration."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    kernel: KernelConfig = Field(default_factory=KernelConfig)
    os_release: OSReleaseConfig = Field(default_factory=OSReleaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
