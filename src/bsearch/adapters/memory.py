"""In-memory adapters for tests.

Stand-ins for the production adapters wired by ``build_testing``: no
configuration files are read, nothing is displayed and logging is left
alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ..domain.enums import OutputFormat
from .config.demo import DemoSettings


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty Config regardless of profile."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Display nothing."""


def load_demo_settings_in_memory(config_dict: Mapping[str, Any]) -> DemoSettings:
    """Ignore ``config_dict`` and return the built-in demonstration."""
    return DemoSettings()


def init_logging_in_memory(config: Config) -> None:
    """Leave the logging runtime as the caller set it up."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_demo_settings_in_memory",
]
