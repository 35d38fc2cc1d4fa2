"""Demonstration command: the fixed two-lookup example."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from bsearch.domain.errors import ConfigurationError
from bsearch.domain.search import run_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, pass_cli_context
from ..exit_codes import ExitCode, exit_with

logger = logging.getLogger(__name__)


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@pass_cli_context
def cli_demo(cli_ctx: CLIContext) -> None:
    """Search the demonstration sequence and print one index per target.

    With the shipped configuration this searches 1 3 5 7 9 11 13 for 7 and 4
    and prints 3 and -1. Change the ``[demo]`` section (or use
    ``--set demo.targets=[...]``) to try other lookups.
    """
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        try:
            settings = cli_ctx.services.load_demo_settings(cli_ctx.config.as_dict())
        except ConfigurationError as exc:
            logger.error("Demo configuration rejected", extra={"error": str(exc)})
            exit_with(ExitCode.CONFIG_ERROR, str(exc))

        logger.info(
            "Running demonstration",
            extra={"size": len(settings.sequence), "targets": list(settings.targets)},
        )
        for outcome in run_demo(settings.sequence, settings.targets):
            click.echo(outcome.index)


__all__ = ["cli_demo"]
