"""Configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or unsafe as path parts.

    Delegates to ``lib_layered_config.validate_profile_name``.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("production")

        >>> try:
        ...     validate_profile("../etc/passwd")
        ... except ValueError as exc:
        ...     print(isinstance(exc, ValueError))
        True
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One load per (profile, start_dir) for the lifetime of the process.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Precedence (lowest to highest): defaults -> app -> host -> user -> dotenv -> env.
    A profile inserts ``profile/<name>/`` into every configuration path.

    Args:
        profile: Optional profile name (alphanumerics, hyphens, underscores).
        start_dir: Directory that seeds ``.env`` discovery; defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("greeter.default_text")
        'Hello World'
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configuration so the next ``get_config()`` re-reads disk."""
    _get_config_impl.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
