"""Behavioral contract of the in-memory adapters and the composition root.

Production adapters run through the CLI integration tests; the in-memory
doubles replace them wherever disk and logging must stay untouched.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest
from lib_layered_config import Config

from bsearch.adapters.config.demo import DemoSettings
from bsearch.adapters.memory import (
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
    load_demo_settings_in_memory,
)
from bsearch.composition import AppServices, build_production, build_testing
from bsearch.domain.enums import OutputFormat


@pytest.mark.os_agnostic
def test_in_memory_config_is_empty_for_any_profile() -> None:
    assert get_config_in_memory().as_dict() == {}
    assert get_config_in_memory(profile="staging", start_dir="/nowhere").as_dict() == {}


@pytest.mark.os_agnostic
def test_in_memory_display_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    display_config_in_memory(Config({"demo": {"targets": [1]}}, {}), output_format=OutputFormat.JSON, section="demo")

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_in_memory_demo_settings_ignore_config() -> None:
    """Even a broken [demo] section yields the built-in example."""
    assert load_demo_settings_in_memory({"demo": {"targets": "garbage"}}) == DemoSettings()


@pytest.mark.os_agnostic
def test_in_memory_logging_is_noop() -> None:
    assert init_logging_in_memory(Config({}, {})) is None


@pytest.mark.os_agnostic
def test_build_testing_wires_in_memory_adapters() -> None:
    services = build_testing()

    assert services.get_config is get_config_in_memory
    assert services.display_config is display_config_in_memory
    assert services.load_demo_settings is load_demo_settings_in_memory
    assert services.init_logging is init_logging_in_memory


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    from bsearch.adapters.config.demo import load_demo_settings
    from bsearch.adapters.config.loader import get_config
    from bsearch.adapters.logging.setup import init_logging

    services = build_production()

    assert services.get_config is get_config
    assert services.load_demo_settings is load_demo_settings
    assert services.init_logging is init_logging


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_testing()

    with pytest.raises(FrozenInstanceError):
        services.get_config = get_config_in_memory  # type: ignore[misc]
    assert isinstance(services, AppServices)


@pytest.mark.os_agnostic
def test_app_services_names_only_the_four_adapters() -> None:
    """No services beyond config loading, display, demo settings and logging."""
    assert set(AppServices.__dataclass_fields__) == {"get_config", "display_config", "load_demo_settings", "init_logging"}
