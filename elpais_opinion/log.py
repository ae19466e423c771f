"""Logging configuration utilities.

One call to ``configure_logging`` at process start; modules get their
logger through ``get_logger(__name__)``.
"""

import logging
import sys

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Send log records to stdout so they interleave with the console report."""
    root_logger = logging.getLogger()
    level = level or config.LOG_LEVEL
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Selenium and urllib3 are chatty at DEBUG.
    for noisy in ("selenium", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
