"""Greeting configuration model and loader.

Parses the ``[greeter]`` section into the immutable :class:`GreetingConfig`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from greeter.domain.behaviors import build_greeting
from greeter.domain.errors import ConfigurationError


class GreetingConfig(BaseModel):
    """Validated, immutable ``[greeter]`` settings.

    Attributes:
        default_text: Text greeted by the ``hello`` command.

    Example:
        >>> GreetingConfig().default_text
        'Hello World'
        >>> GreetingConfig(default_text="").default_text
        ''
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    default_text: str = Field(default_factory=build_greeting)


def load_greeting_config_from_dict(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Build GreetingConfig from the ``greeter`` entry of a config mapping.

    Args:
        config_dict: Full configuration mapping (e.g. ``Config.as_dict()``).

    Returns:
        Parsed settings; defaults when the section is absent or empty.

    Raises:
        ConfigurationError: If the section holds unknown keys or wrong types.

    Examples:
        >>> load_greeting_config_from_dict({}).default_text
        'Hello World'
        >>> load_greeting_config_from_dict({"greeter": {"default_text": "Hi"}}).default_text
        'Hi'
    """
    section = config_dict.get("greeter", {})
    try:
        return GreetingConfig.model_validate(section if section else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [greeter] configuration: {exc}") from exc


__all__ = [
    "GreetingConfig",
    "load_greeting_config_from_dict",
]
