"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` section.

The console script and ``python -m bsearch`` both reach :func:`init_logging`
through the root command. Commands log through ``logging.getLogger`` and
the stdlib bridge forwards the records to the runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from bsearch import __init__conf__
from bsearch.domain.errors import ConfigurationError


class LoggingSettings(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` get defaults here; every other key is
    handed to ``lib_log_rich.runtime.RuntimeConfig`` as written.

    Example:
        >>> LoggingSettings().service
        'bsearch'
        >>> LoggingSettings(console_level="DEBUG").model_dump()
        {'service': 'bsearch', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"

    def runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(**self.model_dump())


def logging_settings(config: Config) -> LoggingSettings:
    """Validate the ``[lib_log_rich]`` section of ``config``.

    Raises:
        ConfigurationError: If the section is present but not a table.
    """
    section: Any = config.get("lib_log_rich", default=None) or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[lib_log_rich] must be a table, got {type(section).__name__}")
    return LoggingSettings.model_validate(dict(section))


def init_logging(config: Config) -> None:
    """Start the runtime once per process and bridge stdlib logging into it.

    ``.env`` files are honoured so ``LOG_*`` variables apply. A runtime that
    is already running is left untouched.

    Raises:
        ConfigurationError: If the section holds values lib_log_rich refuses,
            such as an unknown level name.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    try:
        runtime_config = logging_settings(config).runtime_config()
        lib_log_rich.config.enable_dotenv()
        lib_log_rich.runtime.init(runtime_config)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid [lib_log_rich] configuration: {exc}") from exc
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingSettings",
    "init_logging",
    "logging_settings",
]
