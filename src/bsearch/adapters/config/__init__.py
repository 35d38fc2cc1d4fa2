"""Configuration adapter.

Contents:
    * :mod:`.loader` - layered configuration reading
    * :mod:`.overrides` - ``--set`` overrides
    * :mod:`.demo` - ``[demo]`` section validation
    * :mod:`.display` - human/JSON display
"""

from __future__ import annotations

from .demo import DemoSettings, load_demo_settings
from .display import display_config
from .loader import DEFAULT_CONFIG_PATH, get_config
from .overrides import apply_overrides

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DemoSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "load_demo_settings",
]
