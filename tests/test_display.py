"""Config display wrapper: error paths and rendering through lib_layered_config."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from greeter.adapters.config.display import display_config
from greeter.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_rejects_unknown_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Asking for a missing section raises ValueError in every format."""
    config = config_factory({"greeter": {"default_text": "Hello World"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="missing")


@pytest.mark.os_agnostic
def test_display_human_renders_greeter_section(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output is TOML-like with section headers."""
    display_config(Config({"greeter": {"default_text": "Hi"}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[greeter]" in output
    assert 'default_text = "Hi"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_greeter_section(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output carries keys and values."""
    display_config(Config({"greeter": {"default_text": "Hi"}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"greeter"' in output
    assert '"default_text": "Hi"' in output


@pytest.mark.os_agnostic
def test_display_human_shows_profile_in_provenance(
    capsys: pytest.CaptureFixture[str],
    source_info_factory: Callable[..., SourceInfo],
) -> None:
    """The profile name reaches the provenance comment."""
    metadata: dict[str, SourceInfo] = {
        "greeter.default_text": source_info_factory(
            "greeter.default_text", "user", "/home/user/.config/greeter/config.toml"
        ),
    }
    config = Config({"greeter": {"default_text": "Hi"}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    assert "# layer:user profile:production" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_section_with_empty_string_is_shown(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty default_text is a value, not a missing section."""
    config = Config({"greeter": {"default_text": ""}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="greeter")

    assert 'default_text = ""' in capsys.readouterr().out
