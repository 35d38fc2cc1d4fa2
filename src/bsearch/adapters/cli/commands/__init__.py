"""CLI command implementations registered on the root group.

Contents:
    * Search command from :mod:`.search_cmd`
    * Demonstration command from :mod:`.demo_cmd`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .demo_cmd import cli_demo
from .info import cli_info
from .search_cmd import cli_search

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_info",
    "cli_search",
]
