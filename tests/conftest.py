"""Shared pytest fixtures for search, CLI and module-entry tests.

Fixtures carry descriptive names so tests read as plain English; tests pick
them up through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from bsearch.composition import AppServices


def _load_dotenv() -> None:
    """Load the project .env file when present (e.g. LOG_* overrides)."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

#: The sequence searched by the demonstration.
DEMO_SEQUENCE: list[int] = [1, 3, 5, 7, 9, 11, 13]

#: Runtime used while tests run: nothing below CRITICAL reaches the console.
QUIET_RUNTIME = lib_log_rich.runtime.RuntimeConfig(
    service="bsearch-tests",
    environment="test",
    console_level="CRITICAL",
    enable_ring_buffer=False,
    queue_enabled=False,
)


@pytest.fixture(autouse=True)
def quiet_logging_runtime() -> Iterator[None]:
    """Give every test a running, silent lib_log_rich runtime.

    Commands log inside ``lib_log_rich.runtime.bind`` scopes, which need a
    runtime even when the in-memory adapters skip ``init_logging``.
    ``main()`` may shut the runtime down itself, so teardown checks first.
    """
    if not lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.init(QUIET_RUNTIME)
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; error messages go to
    ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def demo_sequence() -> list[int]:
    """Return a fresh copy of the demonstration sequence."""
    return list(DEMO_SEQUENCE)


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations that need real adapters."""
    from bsearch.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide ``build_testing`` for CLI invocations that must not touch disk."""
    from bsearch.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with both traceback flags off and restore the whole config afterwards."""
    with lib_cli_exit_tools.config_overrides(traceback=False, traceback_force_color=False):
        yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context() -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory turning a config dict into a services factory.

    Only ``get_config`` is replaced; display, demo settings and logging use
    the production adapters.

    Example:
        def test_demo_targets(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"demo": {"targets": [13]}})
            result = cli_runner.invoke(cli, ["demo"], obj=factory)
            assert result.stdout == "6\\n"
    """
    from bsearch.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        services = replace(build_production(), get_config=lambda **_kwargs: config)
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture() -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a services factory whose ``get_config`` records each requested profile."""
    from bsearch.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: services

    return _inject
