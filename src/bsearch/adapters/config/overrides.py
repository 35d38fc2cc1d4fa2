"""``--set SECTION.KEY=VALUE`` overrides layered over the loaded configuration.

Values are read as JSON where they parse (``[1,13]``, ``7``, ``true``) and
kept as plain strings otherwise (``WARNING``).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config


@dataclass(frozen=True, slots=True)
class Override:
    """One ``--set`` entry: a dotted path, section first, and its value.

    Example:
        >>> Override.parse("demo.targets=[1,13]")
        Override(path=('demo', 'targets'), value=[1, 13])
    """

    path: tuple[str, ...]
    value: Any

    @classmethod
    def parse(cls, raw: str) -> Override:
        """Read ``SECTION.KEY[.SUBKEY...]=VALUE``; only the first ``=`` splits.

        Raises:
            ValueError: If ``=`` is missing, the path names no key below a
                section, or a path segment is empty.
        """
        dotted, equals, text = raw.partition("=")
        if not equals:
            raise ValueError(f"--set {raw!r}: expected SECTION.KEY=VALUE")
        path = tuple(dotted.split("."))
        if len(path) < 2:
            raise ValueError(f"--set {raw!r}: {dotted!r} names a section but no key")
        if not all(path):
            raise ValueError(f"--set {raw!r}: empty segment in {dotted!r}")
        return cls(path=path, value=coerce_value(text))


def coerce_value(text: str) -> Any:
    """Return ``text`` parsed as JSON, or unchanged when it is not JSON.

    Examples:
        >>> coerce_value("[7, 4]")
        [7, 4]
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def nest_overrides(raw_overrides: Iterable[str]) -> dict[str, Any]:
    """Fold ``--set`` entries into one nested mapping, later entries winning.

    Raises:
        ValueError: If an entry is malformed or nests below a key that an
            earlier entry set to a plain value.

    Example:
        >>> nest_overrides(["demo.targets=[1]", "lib_log_rich.console_level=DEBUG"])
        {'demo': {'targets': [1]}, 'lib_log_rich': {'console_level': 'DEBUG'}}
    """
    tree: dict[str, Any] = {}
    for raw in raw_overrides:
        override = Override.parse(raw)
        *parents, leaf = override.path
        node = tree
        for name in parents:
            child = node.setdefault(name, {})
            if not isinstance(child, dict):
                raise ValueError(f"--set {raw!r}: {name!r} was already set to a plain value")
            node = child
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with the ``--set`` entries deep-merged on top.

    Example:
        >>> cfg = Config({"demo": {"targets": [7, 4]}}, {})
        >>> apply_overrides(cfg, ("demo.targets=[13]",)).get("demo.targets")
        [13]
    """
    if not raw_overrides:
        return config
    return config.with_overrides(nest_overrides(raw_overrides))


__all__ = [
    "Override",
    "apply_overrides",
    "coerce_value",
    "nest_overrides",
]
