"""
File for logging

Handlers and the level live on the package logger, "footycash". Module loggers below it (footycash.chainparams.genesis,
...) carry neither and propagate, so get_logger(PACKAGE_LOGGER, "DEBUG") changes the level for every module.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["PACKAGE_LOGGER", "DEFAULT_LOG_LEVEL", "get_logger"]

PACKAGE_LOGGER = "footycash"
DEFAULT_LOG_LEVEL = "INFO"


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with the specified configuration.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Module loggers are left unset by default
            and inherit the package logger's level.
        log_file: Optional path to log file for persistent logging
        format_string: Optional custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if log_level is not None:
        logger.setLevel(getattr(logging, log_level.upper()))

    # Module loggers propagate to the package logger, which owns the handlers
    if name.startswith(PACKAGE_LOGGER + "."):
        _add_handlers(logging.getLogger(PACKAGE_LOGGER), log_file, format_string)
    else:
        _add_handlers(logger, log_file, format_string)
    return logger


def _add_handlers(logger: logging.Logger, log_file: Optional[Path], format_string: Optional[str]):
    # Handlers are only added once
    if logger.handlers:
        return

    if logger.level == logging.NOTSET:
        logger.setLevel(getattr(logging, DEFAULT_LOG_LEVEL))

    if format_string is None:
        format_string = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'

    formatter = logging.Formatter(format_string)

    # Console handler
    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Optional file handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
