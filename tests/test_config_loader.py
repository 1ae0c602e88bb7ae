"""Configuration loader: bundled defaults, caching, and profile validation."""

from __future__ import annotations

import pytest

from greeter.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_file_is_bundled() -> None:
    """defaultconfig.toml ships next to the loader."""
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_bundled_defaults_define_greeter_section() -> None:
    """The bundled file declares [greeter] and [lib_log_rich]."""
    content = get_default_config_path().read_text(encoding="utf-8")

    assert "[greeter]" in content
    assert 'default_text = "Hello World"' in content
    assert "[lib_log_rich]" in content


@pytest.mark.os_agnostic
def test_get_config_reads_bundled_default_text(clear_config_cache: None) -> None:
    """Without overriding layers the default greeting comes from the bundled file."""
    config = get_config()

    assert isinstance(config.get("greeter.default_text"), str)


@pytest.mark.os_agnostic
def test_get_config_is_cached(clear_config_cache: None) -> None:
    """Repeated calls with the same arguments return the same object."""
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_cache_clear_forces_reload(clear_config_cache: None) -> None:
    """cache_clear drops the cached Config."""
    first = get_config()
    get_config.cache_clear()

    assert get_config() is not first


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["production", "staging-eu", "test_1"])
def test_validate_profile_accepts_safe_names(profile: str) -> None:
    """Alphanumerics, hyphens, and underscores are allowed."""
    validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "a/b", ""])
def test_validate_profile_rejects_unsafe_names(profile: str) -> None:
    """Path traversal and empty names are rejected."""
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_validate_profile_honours_max_length() -> None:
    """Names longer than max_length are rejected."""
    with pytest.raises(ValueError):
        validate_profile("a" * 11, max_length=10)


@pytest.mark.os_agnostic
def test_get_config_rejects_unsafe_profile(clear_config_cache: None) -> None:
    """get_config validates the profile before reading anything."""
    with pytest.raises(ValueError):
        get_config(profile="../../etc")


@pytest.mark.os_agnostic
def test_validate_profile_error_is_catchable_as_value_error() -> None:
    """Library-specific validation errors still satisfy ``except ValueError``."""
    try:
        validate_profile("../etc/passwd")
    except ValueError as exc:
        assert "profile" in str(exc).lower()
    else:
        pytest.fail("unsafe profile was accepted")
