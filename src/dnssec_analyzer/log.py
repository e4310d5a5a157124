"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Route the package's log records through rich.

    Args:
        level: Log level name for the package logger
        console: Console to write to; stderr when omitted

    Returns:
        The package logger
    """
    logger = logging.getLogger("dnssec_analyzer")
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
