"""Exit codes for the CLI error paths.

A search that does not find its target is not an error: it prints ``-1``
and exits with :attr:`ExitCode.SUCCESS`. Signal codes (130, 141, 143) are
listed for reference; ``lib_cli_exit_tools`` produces them itself.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NoReturn

import rich_click as click


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


def exit_with(code: ExitCode, message: str) -> NoReturn:
    """Print ``Error: <message>`` to stderr and leave with ``code``."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


__all__ = ["ExitCode", "exit_with"]
