"""
Logging setup for applications embedding jsonpathops.

The library itself only emits records through module loggers under the
``jsonpathops`` namespace and never installs handlers on import.
"""

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "jsonpathops"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(
    level: int = logging.INFO,
    format_str: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Params:
        level: Logging level for the package logger and its handler
        format_str: Format string for emitted records
        stream: Output stream, defaults to sys.stderr

    Returns:
        The configured ``jsonpathops`` logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = []
    package_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_str))
    package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger, normally called with ``__name__``."""
    return logging.getLogger(name)
