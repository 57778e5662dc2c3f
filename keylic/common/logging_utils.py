"""
Logging helpers shared by the vendor and consumer managers.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(logger: logging.Logger, log_level: int) -> None:
    """
    Attach a StreamHandler with the standard format, once per logger.

    Args:
        logger: The logger instance to configure
        log_level: The logging level to set
    """
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str, log_level: int | None = None) -> logging.Logger:
    """Return the named logger, configured only when a level is requested."""
    logger = logging.getLogger(name)
    if log_level is not None:
        setup_logger(logger, log_level)
    return logger
