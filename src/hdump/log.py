"""
Logging setup for the dump tool.

Dump output and banners go to stdout; log records go to stderr.
"""

import logging
import sys

LOGGER_NAME = "hdump"
LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: DEBUG level when True, INFO otherwise

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Repeated calls (tests, embedding) must not stack handlers
    logger.handlers.clear()
    logger.propagate = False

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger
