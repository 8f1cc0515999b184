"""
Logging Configuration
Sets up the 'lorenzviz' logger for the application.

The level and an optional log file can be chosen without touching code via
the LORENZVIZ_LOG_LEVEL / LORENZVIZ_LOG_FILE environment variables, e.g.
``LORENZVIZ_LOG_LEVEL=DEBUG`` to trace every key command and recomputation.
"""
import logging
import os
import sys
from typing import Optional, Union

from lorenzviz.config import LOG_FILE_ENV, LOG_LEVEL_ENV


def resolve_level(level: Union[int, str]) -> int:
    """
    Accepts a numeric level or a level name ('debug', 'INFO', ...).
    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'lorenzviz' namespace.

    Args:
        level: Logging level or level name. Defaults to $LORENZVIZ_LOG_LEVEL, else INFO.
        log_file: Optional path to save logs to. Defaults to $LORENZVIZ_LOG_FILE.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, logging.INFO)
    level = resolve_level(level)
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None

    logger = logging.getLogger("lorenzviz")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
