"""Logging configuration for CLI, API and Lambda runtimes."""

from __future__ import annotations

import sys

from loguru import logger

DEFAULT_LOG_LEVEL = "INFO"


def setup_logging(service_name: str = "statuspage-monitor", log_level: str | None = None):
    """Configure the loguru console sink.

    Args:
        service_name: Name shown in every log line.
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Configured loguru logger.
    """

    effective_level = (log_level or DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            f"<cyan>{service_name.upper()}</cyan> | "
            "<level>{message}</level>"
        ),
        level=effective_level,
        colorize=sys.stderr.isatty(),
    )
    return logger


__all__ = ["setup_logging"]
