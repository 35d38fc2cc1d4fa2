"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the metadata sync
tests fail when they drift.

Contents:
    * Package identity constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used to resolve configuration paths.
    * :func:`print_info` - render the metadata block for ``bsearch info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name as published on the package index.
name: Final[str] = "bsearch"
#: One-line summary used as the CLI help header.
title: Final[str] = "Binary search over sorted integer sequences"
#: Package version (keep in sync with pyproject.toml).
version: Final[str] = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://github.com/bsearch-dev/bsearch"
#: Package author.
author: Final[str] = "bsearch developers"
#: Console script name.
shell_command: Final[str] = "bsearch"

#: Vendor segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "bsearch"
#: Application segment for macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "bsearch"
#: Slug used for Linux XDG paths and environment variable prefixes.
LAYEREDCONF_SLUG: Final[str] = "bsearch"


def print_info() -> None:
    """Print the package metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for bsearch:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
