"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.greeting import GreetingConfig, load_greeting_config_from_dict


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "greeter" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_greeting_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Parse greeting settings with the real Pydantic model."""
    return load_greeting_config_from_dict(config_dict)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "load_greeting_config_from_dict_in_memory",
]
