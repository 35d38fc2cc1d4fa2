"""Search command: look up one target in a sorted list of integers."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from bsearch.domain.enums import OutputFormat
from bsearch.domain.search import SearchOutcome, lookup

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def render_outcome(outcome: SearchOutcome, output_format: OutputFormat) -> str:
    """Render a lookup as a bare index or a JSON object.

    Examples:
        >>> render_outcome(SearchOutcome(target=7, index=3), OutputFormat.HUMAN)
        '3'
        >>> render_outcome(SearchOutcome(target=4, index=-1), OutputFormat.JSON)
        '{"target":4,"index":-1,"found":false}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps(outcome.as_dict()).decode()
    return str(outcome.index)


@click.command("search", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--target", "-t", type=int, required=True, help="Value to locate")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (bare index or JSON)",
)
@click.argument("values", nargs=-1, type=int)
def cli_search(target: int, output_format: str, values: tuple[int, ...]) -> None:
    r"""Print the index of TARGET in VALUES, or -1 when it is absent.

    VALUES must already be sorted ascending; the order is not checked and an
    unsorted list gives unreliable results. Put ``--`` before VALUES when the
    first value is negative.

    \b
    Examples:
      bsearch search --target 7 1 3 5 7 9 11 13      -> 3
      bsearch search -t 4 --format json 1 3 5 7      -> {"target":4,"index":-1,"found":false}
    """
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "search", "target": target, "size": len(values), "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-search", extra=extra):
        outcome = lookup(values, target)
        logger.info(
            "Search finished",
            extra={"target": target, "index": outcome.index, "found": outcome.found},
        )
        click.echo(render_outcome(outcome, fmt))


__all__ = ["cli_search", "render_outcome"]
