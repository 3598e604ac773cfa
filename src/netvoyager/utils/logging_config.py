"""Logging setup shared by the command line entry point."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> None:
    """Attach a stderr handler to the ``netvoyager`` logger.

    Calling it again only updates the level.
    """
    root = logging.getLogger("netvoyager")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
