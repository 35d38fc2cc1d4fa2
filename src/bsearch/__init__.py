"""Public package surface exposing the search routine, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: binary search and the demonstration lookups
- Configuration: layered configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Configuration
from .adapters.config.loader import get_config

# Domain exports
from .domain.search import (
    ABSENT,
    SearchOutcome,
    lookup,
    run_demo,
    search,
)

__all__ = [
    "ABSENT",
    "SearchOutcome",
    "get_config",
    "lookup",
    "print_info",
    "run_demo",
    "search",
]
