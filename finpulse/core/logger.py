"""Logging setup for FinPulse.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
setup_logging() once to attach a Rich handler to the package logger.
"""

import logging

from rich.logging import RichHandler

LOGGER_NAME = "finpulse"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the finpulse logger with a RichHandler.

    Calling this again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger
