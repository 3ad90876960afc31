"""Logging configuration for qperceptron."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from qperceptron.config import LOGS_DIR, LOG_LEVEL, LOG_FORMAT, LOG_TO_FILE

ROOT_LOGGER_NAME = "qperceptron"


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Calling this again for the same logger replaces the handlers it
    installed earlier instead of stacking duplicates.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        to_file: Whether to attach the rotating file handler

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    if to_file is None:
        to_file = LOG_TO_FILE
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        if getattr(handler, "_qperceptron_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler._qperceptron_handler = True
    logger.addHandler(console_handler)

    # File handler
    if to_file:
        if log_file is None:
            log_file = LOGS_DIR / f"{name}.log"

        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler._qperceptron_handler = True
        logger.addHandler(file_handler)

    return logger


__all__ = ["ROOT_LOGGER_NAME", "setup_logging"]
