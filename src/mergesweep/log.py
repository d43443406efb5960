"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mergesweep"


def setup_logging(verbose: bool = False) -> None:
    """Route the package's log records to stderr through rich.

    Args:
        verbose: Log debug records instead of warnings and above only
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
