"""Loguru sink configuration for the command-line entry point."""

import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"
VERBOSE_LEVEL = "DEBUG"
LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(verbose: bool = False) -> int:
    """Replace loguru's default handler with a single stderr sink.

    Returns the handler id so callers (tests) can remove it again.
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level=VERBOSE_LEVEL if verbose else DEFAULT_LEVEL,
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
