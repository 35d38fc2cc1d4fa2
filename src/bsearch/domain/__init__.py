"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.search` - Binary search and the demonstration lookups
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat
from .errors import ConfigurationError
from .search import (
    ABSENT,
    DEMO_SEQUENCE,
    DEMO_TARGETS,
    SearchOutcome,
    lookup,
    run_demo,
    search,
)

__all__ = [
    # Search
    "ABSENT",
    "DEMO_SEQUENCE",
    "DEMO_TARGETS",
    "SearchOutcome",
    "lookup",
    "run_demo",
    "search",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
