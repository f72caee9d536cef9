"""Utility functions and helpers."""

from bytes_converter.core.utils.log_config import LOG_DIR, configure_logging

__all__ = ["configure_logging", "LOG_DIR"]
