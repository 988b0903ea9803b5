"""
Root logger setup for the catalog service.

One pipe-separated line per record on stdout. Request bodies and
database credentials are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown values fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Request lines come from RequestContextMiddleware instead.
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
