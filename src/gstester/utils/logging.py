"""Logging configuration for gstester.

Diagnostic trace lines are written by the `gstester` loggers. Nothing is
printed unless a handler is attached, which is what `configure_logging` does.
"""

import logging
import os
import sys

LOGGER_NAME = "gstester"
DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler writing to the current `sys.stderr`, looked up per record"""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def is_configured():
    """Check if `configure_logging` has attached its handler already"""
    return any(
        getattr(handler, "_gstester_handler", False)
        for handler in logging.getLogger(LOGGER_NAME).handlers
    )


def configure_logging(level=None, format_string=None, stream=None):
    """Configure logging for gstester.

    Attaches a single stream handler (stderr by default) to the `gstester`
    logger. Calling this again replaces the handler rather than adding
    another one.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        stream: Stream to write to, defaults to `sys.stderr`

    Returns:
        The configured `gstester` logger
    """
    # Get level from environment or use default
    if level is None:
        level = os.environ.get("GSTESTER_LOG_LEVEL", "INFO")

    # Convert string level to logging constant
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = level

    if format_string is None:
        format_string = (
            DEBUG_FORMAT if numeric_level == logging.DEBUG else DEFAULT_FORMAT
        )

    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_gstester_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream) if stream else StderrHandler()
    handler.setFormatter(logging.Formatter(format_string))
    handler._gstester_handler = True

    logger.addHandler(handler)
    logger.setLevel(numeric_level)

    return logger
