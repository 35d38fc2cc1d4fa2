"""Demonstration settings model and loader.

Validates the ``[demo]`` configuration section into a frozen
:class:`DemoSettings` instance consumed by ``bsearch demo``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

import orjson
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from bsearch.domain.errors import ConfigurationError
from bsearch.domain.search import DEMO_SEQUENCE, DEMO_TARGETS


class DemoSettings(BaseModel):
    """Validated, immutable demonstration settings.

    ``sequence`` is expected to be sorted ascending. Like the search itself,
    the model does not enforce this. Items must be real integers: booleans,
    floats and numeric strings inside a list are rejected.

    Example:
        >>> settings = DemoSettings()
        >>> settings.sequence
        [1, 3, 5, 7, 9, 11, 13]
        >>> settings.targets
        [7, 4]
    """

    model_config = ConfigDict(frozen=True)

    sequence: list[StrictInt] = Field(default_factory=lambda: list(DEMO_SEQUENCE))
    targets: list[StrictInt] = Field(default_factory=lambda: list(DEMO_TARGETS))

    @field_validator("sequence", "targets", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> Any:
        """Parse JSON arrays and bare numbers arriving as strings.

        Environment variables and .env files deliver strings instead of TOML
        arrays. Empty strings become empty lists.

        Examples:
            >>> DemoSettings._coerce_string_to_list("[7, 4]")
            [7, 4]
            >>> DemoSettings._coerce_string_to_list("7")
            [7]
            >>> DemoSettings._coerce_string_to_list("")
            []
        """
        if not isinstance(v, str):
            return v
        if not v.strip():
            return []
        try:
            parsed: Any = orjson.loads(v)
        except orjson.JSONDecodeError:
            return v
        return cast(list[Any], parsed) if isinstance(parsed, list) else [parsed]


def load_demo_settings(config_dict: Mapping[str, Any]) -> DemoSettings:
    """Load DemoSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    Missing keys fall back to the built-in demonstration values.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.

    Returns:
        Validated demonstration settings.

    Raises:
        ConfigurationError: When the ``[demo]`` section is not a table or
            holds values that are not integer lists.

    Example:
        >>> load_demo_settings({"demo": {"targets": [1, 13]}}).targets
        [1, 13]
        >>> load_demo_settings({}).sequence
        [1, 3, 5, 7, 9, 11, 13]
    """
    demo_section: Any = config_dict.get("demo", {})
    if not isinstance(demo_section, Mapping):
        raise ConfigurationError(f"[demo] must be a table, got {type(demo_section).__name__}")

    try:
        return DemoSettings.model_validate(dict(cast(Mapping[str, Any], demo_section)))
    except ValidationError as exc:
        problems = "; ".join(
            f"demo.{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid [demo] configuration: {problems}") from exc


__all__ = ["DemoSettings", "load_demo_settings"]
