"""Logging utilities for monitoring and debugging."""

from candlefeed.core.logging.config import LogConfig
from candlefeed.core.logging.logger import (
    configure_logging,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "get_logger",
    "configure_logging",
    "log_context",
    "logger",
]
