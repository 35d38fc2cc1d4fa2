"""Wire adapters into the services object the CLI receives.

``build_production`` is what the console script and ``python -m bsearch``
use; ``build_testing`` swaps every I/O boundary for the in-memory adapters.
Individual services can be replaced with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from lib_layered_config import Config

from ..adapters.config.demo import DemoSettings, load_demo_settings
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Adapters the CLI reaches through the Click context."""

    get_config: Callable[..., Config]
    display_config: Callable[..., None]
    load_demo_settings: Callable[[Mapping[str, Any]], DemoSettings]
    init_logging: Callable[[Config], None]


def build_production() -> AppServices:
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_demo_settings=load_demo_settings,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services backed by the in-memory adapters.

    Configuration is empty, ``config`` displays nothing, ``demo`` runs the
    built-in example and logging is not touched.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_demo_settings_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_demo_settings=load_demo_settings_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
