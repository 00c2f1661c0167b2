"""Module: init_logging.py

Author: Michael Economou
Date: 2026-10-02

init_logging.py
Provides a single entry point to initialize the logging system
for a host application with app-specific log file names.
Functions:
init_logging(app_name): Sets up loggers with rotating file handlers.
"""

import logging

from trisplit.utils.logging.logger_factory import get_cached_logger
from trisplit.utils.logging.logger_file_helper import add_file_handler


def init_logging(app_name: str = "trisplit", log_dir: str = "logs") -> logging.Logger:
    """Initializes logging for the application, adding rotating file handlers
    for activity and error logs under the given app name.

    Args:
        app_name (str): The base name for log files (e.g., 'trisplit').
        log_dir (str): Directory receiving the log files.

    Returns:
        logging.Logger: The package logger the handlers were attached to.

    """
    logger = get_cached_logger("trisplit")

    add_file_handler(logger, f"{log_dir}/{app_name}_activity.log", level=logging.INFO)
    add_file_handler(logger, f"{log_dir}/{app_name}_errors.log", level=logging.ERROR)

    return logger
