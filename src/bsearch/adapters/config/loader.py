"""Read the layered ``bsearch`` configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from lib_layered_config import Config, read_config

from bsearch import __init__conf__

#: Bundled defaults, the lowest configuration layer.
DEFAULT_CONFIG_PATH: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge every configuration layer over the bundled defaults.

    Layers in increasing precedence: defaults, app, host, user, ``.env``,
    environment (``BSEARCH___DEMO__TARGETS=[1,13]`` style). Platform paths
    come from the ``LAYEREDCONF_*`` identifiers in :mod:`bsearch.__init__conf__`;
    a profile adds a ``profile/<name>/`` segment to each of them.

    Args:
        profile: Optional profile name.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: If ``profile`` is not a safe profile name.

    Example:
        >>> get_config().get("demo.targets")
        [7, 4]
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


__all__ = ["DEFAULT_CONFIG_PATH", "get_config"]
