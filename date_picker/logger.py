"""
Centralised logging configuration.

Usage:
    from date_picker.logger import get_logger
    logger = get_logger(__name__)
    logger.debug("Viewing month changed")

The library only creates loggers. ``configure_logging`` attaches a
handler and is called by the command line entry point.
"""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str = "WARNING") -> None:
    """Install a stdout handler on the package logger, once."""
    global _configured

    package_logger = logging.getLogger("date_picker")
    package_logger.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    package_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the given *name*."""
    return logging.getLogger(name)
