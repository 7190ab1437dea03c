"""Logging configuration"""

import logging
import sys
from typing import Optional


def setup_logger(service_name: str, level: Optional[str] = "INFO") -> logging.Logger:
    """
    Setup console logging for the light service

    Args:
        service_name: Logger name (the package name, so module loggers inherit it)
        level: Log level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger
    """
    log_level = getattr(logging, (level or "INFO").upper())
    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)

    # Re-running setup (e.g. one app per test) must not stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(handler)

    return logger
