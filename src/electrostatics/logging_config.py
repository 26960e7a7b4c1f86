# MIT License (see LICENSE)
"""
Logging configuration for the electrostatics package.

Log records go to stderr so they never interleave with the report on stdout.
"""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the 'electrostatics' logger.

    Calling it again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("electrostatics")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
