"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when configuration values are absent, malformed, or logically
    inconsistent (for example a ``[demo]`` section whose targets are not
    integers). Caught at CLI boundaries and mapped to ``CONFIG_ERROR``.

    Example:
        >>> from bsearch.domain.errors import ConfigurationError
        >>> err = ConfigurationError("demo.targets must be a list of integers")
        >>> str(err)
        'demo.targets must be a list of integers'
    """


__all__ = ["ConfigurationError"]
