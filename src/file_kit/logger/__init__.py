"""Logging utilities for file-kit.

As a library, file-kit only creates loggers under ``file_kit``; the
package root carries a NullHandler and propagates, so records reach
whatever handlers the host application configured.

The ``file-kit`` command installs its own handlers with setup_logging():

    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                |
                                    Console (+ optional File) Handlers

Usage:
    >>> from file_kit.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Extracting %s", archive)  # %-style, never f-strings

Environment Variables:
    FILE_KIT_LOG_LEVEL: Console log level override
    FILE_KIT_LOG_DIR: Directory for file-kit.log when file logging is on
"""

from file_kit.logger.formatters import HybridConsoleFormatter
from file_kit.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)

__all__ = [
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]
