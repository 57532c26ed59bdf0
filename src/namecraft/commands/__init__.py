"""CLI command implementations for namecraft.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .check import check
from .init import init
from .run import run

__all__ = [
    "check",
    "init",
    "run",
]
