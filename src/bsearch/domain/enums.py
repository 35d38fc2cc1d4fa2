"""Type-safe domain enums for output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for search results and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Plain text (bare index, TOML-like configuration).
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
