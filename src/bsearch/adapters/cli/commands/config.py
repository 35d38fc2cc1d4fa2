"""Configuration display command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from bsearch.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, pass_cli_context
from ..exit_codes import ExitCode, exit_with

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'demo')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Show another profile than the root --profile; root --set values still apply",
)
@pass_cli_context
def cli_config(cli_ctx: CLIContext, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the current merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    shown = cli_ctx.for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "section": section, "profile": shown.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration")
        click.echo()
        try:
            shown.services.display_config(shown.config, output_format=fmt, section=section, profile=shown.profile)
        except ValueError as exc:
            exit_with(ExitCode.INVALID_ARGUMENT, str(exc))


__all__ = ["cli_config"]
