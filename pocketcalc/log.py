"""Logging setup."""

import os
import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"

log_format = " | ".join(
    (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{module}:{function}:{line}</> - {message}",
    )
)


def setup_logging(level=None, log_file=None):
    """Route loguru output to stderr and, optionally, a rotating file.

    ``level`` falls back to ``POCKETCALC_LOG_LEVEL`` and then WARNING;
    ``log_file`` falls back to ``POCKETCALC_LOG_FILE``.
    """
    level = (level or os.getenv("POCKETCALC_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    log_file = log_file or os.getenv("POCKETCALC_LOG_FILE")

    logger.enable("pocketcalc")
    logger.remove()  # drop loguru's default handler
    logger.add(sys.stderr, level=level, format=log_format)
    if log_file:
        logger.add(
            log_file,
            level=level,
            format=log_format,
            rotation="512 KB",
            retention=2,
            encoding="utf-8",
        )
    return logger
