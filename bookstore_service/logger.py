"""
Shared logger for the bookstore service.

Everything goes to stderr so that stdout only carries the query report.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("bookstore_service")


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a stderr handler once and set the level."""
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


configure_logging()
