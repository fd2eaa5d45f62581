"""
Logging configuration for maven feed.

Uses loguru for console output and optional file rotation and retention.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger as _logger

if TYPE_CHECKING:
    from maven_feed.config import Config


def setup_logger(
    config: Optional["Config"] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure the logger with console and optional file handlers.

    Args:
        config: Application configuration; defaults apply when omitted
        level: Log level overriding the configured one
        log_file: Log file path overriding the configured one
    """
    from maven_feed.config import LoggingConfig

    log_config = config.logging if config is not None else LoggingConfig()

    level = level or (config.log_level if config is not None else log_config.level) or "INFO"
    log_file = log_file or log_config.file_path
    format = log_config.format

    # Remove default handler
    _logger.remove()

    _logger.add(
        sys.stderr,
        format=format,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _logger.add(
            log_file,
            format=format,
            level=level,
            rotation=log_config.rotation,
            retention=log_config.retention,
            compression="zip",
            encoding="utf-8",
            enqueue=True,  # Thread-safe logging
            backtrace=True,
            diagnose=False,
        )


def get_logger(name: Optional[str] = None):
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    if name:
        return _logger.bind(name=name)
    return _logger


# Re-export logger for direct use
logger = _logger

__all__ = [
    "setup_logger",
    "get_logger",
    "logger",
]
