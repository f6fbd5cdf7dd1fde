"""Centralized logging configuration."""

import logging
from typing import Optional

from holdem_agent import config

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[str] = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Optional explicit log level. Falls back to ``HOLDEM_LOG_LEVEL``
            or INFO when not provided.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``holdem_agent``).
    """
    resolved_level = (level or config.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("holdem_agent")
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
