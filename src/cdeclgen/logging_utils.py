"""
Logging configuration for the cdeclgen package.

All loggers live under the "cdeclgen" namespace. Nothing is configured
at import time; call setup_logging() from an entry point.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "cdeclgen"
LEVEL_ENV_VAR = "CDECLGEN_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...).
            Defaults to $CDECLGEN_LOG_LEVEL, then WARNING.
        log_file: Optional file path that receives a copy of the output

    Returns:
        The configured "cdeclgen" logger
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger of the package logger.

    Args:
        name: Module name; a leading "cdeclgen." is not repeated

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
