"""Run the root group with a services factory and return an exit code.

Shared by the console script and ``python -m bsearch``. Error rendering,
signal handling and restoring the traceback flags afterwards are left to
``lib_cli_exit_tools.cli_session``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime

from bsearch import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .root import cli

if TYPE_CHECKING:
    from bsearch.composition import AppServices


class _WiredCli:
    """The root group with the services factory preset as Click's ``obj``."""

    def __init__(self, services_factory: Callable[[], AppServices]) -> None:
        self._services_factory = services_factory

    def main(
        self,
        args: Sequence[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        **extra: Any,
    ) -> Any:
        return cli.main(
            args=args,
            prog_name=prog_name,
            complete_var=complete_var,
            standalone_mode=standalone_mode,
            obj=self._services_factory,
            **extra,
        )


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put ``lib_cli_exit_tools.config`` back as it was
            before the run.
        services_factory: Returns the AppServices for this run, usually
            ``composition.build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from bsearch.composition import build_production
        >>> main(["demo"], services_factory=build_production)  # doctest: +SKIP
        3
        -1
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    on_main_thread = threading.current_thread() is threading.main_thread()
    try:
        with lib_cli_exit_tools.cli_session(
            summary_limit=TRACEBACK_SUMMARY_LIMIT,
            verbose_limit=TRACEBACK_VERBOSE_LIMIT,
            restore=restore_traceback,
        ) as run:
            return run(
                _WiredCli(services_factory),
                argv=argv,
                prog_name=__init__conf__.shell_command,
                install_signals=on_main_thread,
            )
    finally:
        # Shutdown from a worker thread would stop logging for every other thread.
        if on_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
