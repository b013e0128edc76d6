# ABOUTME: Logging configuration for the shelfparse CLI.
# ABOUTME: Routes the package logger through a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Configure the ``shelfparse`` logger.

    Library modules only create module-level loggers; handlers are attached
    here, once, by the CLI entry point. Calling this again replaces the
    previous handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The package logger.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger("shelfparse")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
