"""Log utilities."""

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = logging.WARNING

# names of loggers created by get_logger
_loggers: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """Retrieve logger with the provided name."""
    logger = logging.getLogger(name)
    logger.setLevel(DEFAULT_LOG_LEVEL)
    # stdout is reserved for the answer text
    logger.handlers = [RichHandler(console=Console(stderr=True))]
    logger.propagate = False
    _loggers.add(name)
    return logger


def set_verbose(verbose: bool) -> None:
    """Switch all loggers created by get_logger to DEBUG or back to default level."""
    level = logging.DEBUG if verbose else DEFAULT_LOG_LEVEL
    for name in _loggers:
        logging.getLogger(name).setLevel(level)
