"""
Logging configuration for the fanedit metadata parser.
"""

import logging
import sys
from typing import Optional, Union


def setup_logger(
    name: str = "fanedit_parser",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and return a logger instance.

    Calling this again on an already configured logger only updates the
    level, so CLIs can raise verbosity after the import-time default.

    Args:
        name: Logger name
        level: Logging level, as an int or a name such as "DEBUG"
        log_file: Optional file path for logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)

    # Format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Default logger instance — created once at import time
logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Child loggers (e.g. "fanedit_parser.search") propagate to the package
    logger, so the module name shows up in output without extra handlers.

    Args:
        module_name: Name of the module (e.g., 'search', 'detail')

    Returns:
        Child logger instance
    """
    return logging.getLogger(f"fanedit_parser.{module_name}")
