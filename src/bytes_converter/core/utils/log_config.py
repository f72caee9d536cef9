"""Logging configuration for the byte converter.

This module provides centralized logging configuration using Loguru.
The library disables its own logger on import; applications such as the
command-line interface call ``configure_logging`` to turn it back on with
console output and, in debug mode, a rotating log file.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".bytes-converter" / "logs"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def configure_logging(debug: bool = False) -> None:
    """Route bytes_converter logs to stderr, and to a log file when debugging.

    Args:
        debug: Log at DEBUG level and also write to ``LOG_DIR/bytes-converter.log``
    """
    logger.remove()  # Remove default handler
    logger.enable("bytes_converter")

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if debug else "WARNING",
        backtrace=True,
        diagnose=debug,
    )

    if debug:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "bytes-converter.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format=FILE_FORMAT,
            level="DEBUG",
            backtrace=True,
            diagnose=True,
        )


__all__ = ["configure_logging", "logger", "LOG_DIR"]
