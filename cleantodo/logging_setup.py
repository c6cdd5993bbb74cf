"""Diagnostic logging configuration."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records for the package to stderr through rich.

    Operator messages are printed directly; logging only carries
    diagnostics, so the default level keeps it quiet.

    Args:
        verbose: Show DEBUG records (file reads/writes, dispatch decisions).
    """
    logger = logging.getLogger("cleantodo")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
