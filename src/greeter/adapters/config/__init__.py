"""Configuration adapter - loading, display, overrides, and greeting settings.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeting` - ``[greeter]`` section model
"""

from __future__ import annotations

from .display import display_config
from .greeting import GreetingConfig, load_greeting_config_from_dict
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "GreetingConfig",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeting_config_from_dict",
]
