"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, validation, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click CLI integration
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
