"""Apply ``--set SECTION.KEY=VALUE`` command-line overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the dotted path; everything after it is the value,
    coerced with :func:`coerce_value`.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or any path part is empty.

    Examples:
        >>> parse_override("greeter.default_text=Good morning")
        ConfigOverride(section='greeter', key_path=('default_text',), value='Good morning')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("Hello World")
        'Hello World'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place *override* into the nested *target* dict, creating levels as needed.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` entry deep-merged on top.

    Later entries win over earlier ones for the same key. With no overrides
    the original object is returned unchanged.

    Raises:
        ValueError: If any entry is malformed.

    Examples:
        >>> cfg = Config({"greeter": {"default_text": "Hello World"}}, {})
        >>> apply_overrides(cfg, ("greeter.default_text=Hi",))["greeter"]["default_text"]
        'Hi'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
