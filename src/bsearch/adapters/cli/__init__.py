"""rich-click command-line interface.

Contents:
    * :data:`cli` - root command group
    * :func:`main` - run the group and return an exit code
    * :class:`ExitCode` - exit codes of the error paths
"""

from __future__ import annotations

from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "cli",
    "main",
]
