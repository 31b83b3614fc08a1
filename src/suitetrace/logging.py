"""Logging configuration for the suitetrace CLI."""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log levels selected by CLI flags."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def configure_logging(verbosity: int = 0, quiet: bool = False, no_color: bool = False) -> Console:
    """Install a Rich handler on the root logger.

    Args:
        verbosity: Number of -v flags (0=info, 1+=debug)
        quiet: Only warnings and errors (overrides verbosity)
        no_color: Disable colored output

    Returns:
        Console the handler writes to (stderr)
    """
    if quiet:
        level = LogLevel.QUIET
    elif verbosity >= 1:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    console = Console(stderr=True, no_color=no_color)
    handler = RichHandler(
        console=console,
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    return console
