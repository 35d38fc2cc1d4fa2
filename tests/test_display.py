"""Config display wrapper: log flushing plus delegation to lib_layered_config."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from bsearch.adapters.config.display import display_config
from bsearch.domain.enums import OutputFormat

DEMO_DATA: dict[str, Any] = {"demo": {"sequence": [1, 3, 5, 7, 9, 11, 13], "targets": [7, 4]}}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_unknown_section_raises_value_error(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Asking for a missing section is a ValueError in either format."""
    with pytest.raises(ValueError, match="not found"):
        display_config(config_factory(DEMO_DATA), output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_human_output_shows_demo_table(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Human output is TOML-like."""
    display_config(config_factory(DEMO_DATA), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[demo]" in output
    assert "targets" in output


@pytest.mark.os_agnostic
def test_json_output_restricted_to_section(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON output for one section carries only that section's keys."""
    data = {**DEMO_DATA, "lib_log_rich": {"console_level": "WARNING"}}

    display_config(config_factory(data), output_format=OutputFormat.JSON, section="demo")

    output = capsys.readouterr().out
    assert '"targets"' in output
    assert "console_level" not in output


@pytest.mark.os_agnostic
def test_profile_appears_in_provenance(
    capsys: pytest.CaptureFixture[str],
    source_info_factory: Callable[..., SourceInfo],
) -> None:
    """The profile name is passed through to the provenance comments."""
    metadata: dict[str, SourceInfo] = {
        "demo.targets": source_info_factory("demo.targets", "user", "/home/user/.config/bsearch/config.toml"),
    }
    config = Config({"demo": {"targets": [7, 4]}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    assert "# layer:user profile:production" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_section_with_only_falsey_values_is_shown(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty targets list is still a present section."""
    config = Config({"demo": {"targets": [], "offset": 0}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="demo")

    output = capsys.readouterr().out
    assert '"targets": []' in output
    assert '"offset": 0' in output
