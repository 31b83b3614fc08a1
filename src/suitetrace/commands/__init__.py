"""CLI command implementations for suitetrace.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .diff import diff
from .export import export
from .init import init, sample
from .trace import coverage, impact, link, matrix, unlink

__all__ = [
    "coverage",
    "diff",
    "export",
    "impact",
    "init",
    "link",
    "matrix",
    "sample",
    "unlink",
]
