"""Root command group and its global options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

from bsearch import __init__conf__
from bsearch.domain.errors import ConfigurationError

from .commands import cli_config, cli_demo, cli_info, cli_search
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, load_config
from .exit_codes import ExitCode, exit_with

if TYPE_CHECKING:
    from bsearch.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Print the full traceback when a command fails",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Read configuration for a named profile, e.g. 'staging'",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. demo.targets=[1,13].",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Turn the services factory in ``ctx.obj`` into a :class:`CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from bsearch.composition import build_production
        >>> CliRunner().invoke(cli, ["demo"], obj=build_production).stdout
        '3\\n-1\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("bsearch expects a services factory as Click's obj")
    services: AppServices = ctx.obj()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    config = load_config(services, profile, set_overrides)
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        exit_with(ExitCode.CONFIG_ERROR, str(exc))
    ctx.obj = CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_search, cli_demo, cli_info, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
