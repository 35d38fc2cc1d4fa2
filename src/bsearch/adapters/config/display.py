"""Display configuration - delegates to lib_layered_config.

Thin wrapper around lib_layered_config's Rich-styled display_config that
flushes pending log output first so log lines and configuration output do
not interleave.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from bsearch.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: ``OutputFormat.HUMAN`` for TOML-like output or
            ``OutputFormat.JSON`` for JSON.
        section: Optional section name (e.g. ``demo``) to restrict output.
        console: Optional Rich Console for output; mainly for tests.
        profile: Optional profile name included in provenance comments.

    Raises:
        ValueError: If the requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
