"""
Logging setup for the command line.

The library only creates module loggers; handlers are configured here once.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOGGER_NAME = "splice"


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """
    Configure the library logger with a Rich handler on stderr.

    Args:
        verbose: Force DEBUG level
        level: Level name used when not verbose
    """
    log_level = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
