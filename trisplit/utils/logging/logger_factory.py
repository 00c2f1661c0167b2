"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-02

logger_factory.py
Logger factory with caching.
Keeps a single patched logger instance per module name.
"""

import logging
import threading

from trisplit.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """
    Thread-safe logger factory with caching.

    Maintains a single logger instance per module name, so repeated
    get_cached_logger(__name__) calls do not re-patch the same logger.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        key = name or "trisplit"
        with cls._lock:
            if key not in cls._loggers:
                cls._loggers[key] = get_logger(key)
            return cls._loggers[key]

    @classmethod
    def get_logger_count(cls) -> int:
        """Get number of cached loggers."""
        return len(cls._loggers)


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """
    Get a cached logger instance.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance
    """
    return LoggerFactory.get_logger(name)
