"""Logging configuration for namecraft CLI."""

import logging
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.ERROR
    NORMAL = logging.WARNING
    VERBOSE = logging.INFO
    DEBUG = logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
    debug: bool = False,
) -> Console:
    """Configure logging based on CLI options.

    Args:
        verbosity: Number of -v flags (0=normal, 1=verbose, 2+=debug)
        quiet: Suppress warnings (takes precedence over debug/verbosity)
        no_color: Disable colored output
        stream: Output stream for logs and prompts (stderr if None)
        debug: Enable debug logging (equivalent to -vv, ignored if quiet is set)

    Returns:
        Configured Rich console for prompts and messages

    Note:
        Normal level is WARNING so that constraint warnings are visible
        without cluttering the questionnaire.
    """
    if quiet:
        level = LogLevel.QUIET
    elif debug or verbosity >= 2:
        level = LogLevel.DEBUG
    elif verbosity >= 1:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    if stream is None:
        console = Console(stderr=True, force_terminal=not no_color, no_color=no_color)
    else:
        console = Console(file=stream, force_terminal=not no_color, no_color=no_color)

    handler = RichHandler(
        console=console,
        show_time=debug or verbosity >= 2,
        show_path=debug or verbosity >= 2,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
