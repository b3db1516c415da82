"""
Centralized logging for hostfacts.

Provides:
- Console logging to stderr (stdout is reserved for fact output)
- Optional rotated file logging

Configuration comes from the ``logging`` section of the config file or the
HOSTFACTS_LOG_* environment variables. See hostfacts.config for details.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from hostfacts.config.models import LoggingConfig


def setup_logger(verbose: bool = False, config: Optional[LoggingConfig] = None) -> None:
    """
    Configure the logger.

    Rules:
    1. CONSOLE: Always log to stderr at the configured level, or DEBUG+ if verbose.
    2. FILE: Only when ``log_file`` is set, rotated by size.

    Args:
        verbose: Enable debug console logging
        config: Optional LoggingConfig override (for testing)
    """
    logger.remove()

    if config is None:
        from hostfacts.config.loader import get_config
        config = get_config().logging

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        format=console_format,
        level="DEBUG" if verbose else config.console_level.upper(),
        colorize=True,
    )

    if config.log_file is not None:
        log_path = Path(config.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation=f"{config.max_size_mb} MB",
            retention=f"{config.retention_days} days",
            level=config.file_level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )
