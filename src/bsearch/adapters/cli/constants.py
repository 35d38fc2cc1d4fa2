"""Shared CLI constants."""

from __future__ import annotations

from typing import Final

#: Context settings shared by every command so ``-h`` works everywhere.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Characters of an error summary printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of a traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
