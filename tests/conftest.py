"""Shared pytest fixtures for CLI, facade, and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from greeter.adapters.memory import WorkerSpy
    from greeter.composition import AppServices

_COVERAGE_BASENAME = ".coverage.greeter"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete SQLite journal leftovers from a crashed coverage run."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project .env file when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**replacements: Any) -> AppServices:
    """Production services with selected ports replaced."""
    from dataclasses import replace

    from greeter.composition import build_production

    return replace(build_production(), **replacements)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real adapters)."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test (not after: it may be monkeypatched)."""
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory producing services whose get_config returns the given Config.

    Only the I/O boundary is replaced; everything else stays production.
    """

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(get_config=_fake_get_config)
        return lambda: services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Like ``inject_config`` but records every profile passed to get_config."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with(get_config=_capturing_get_config)
        return lambda: services

    return _inject


@pytest.fixture
def config_cli_context(
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory that turns a config dict into a services factory."""

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(Config(config_data, {}))

    return _create


@dataclass
class WorkerCliContext:
    """Services factory plus the spy that captures its greetings."""

    factory: Callable[[], Any]
    spy: WorkerSpy


@pytest.fixture
def worker_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], WorkerCliContext]:
    """Return a factory wiring a WorkerSpy and the given config into the CLI.

    Logging stays production so ``lib_log_rich.runtime.bind`` works in commands.

    Example:
        def test_greet(cli_runner, worker_cli_context) -> None:
            ctx = worker_cli_context({})
            cli_runner.invoke(cli, ["greet", "A"], obj=ctx.factory)
            assert ctx.spy.output == "A\\n"
    """
    from greeter.adapters.memory import WorkerSpy as WorkerSpyImpl

    def _create(config_data: dict[str, Any]) -> WorkerCliContext:
        spy = WorkerSpyImpl()
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(get_config=_fake_get_config, create_worker=spy)
        return WorkerCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def worker_spy() -> WorkerSpy:
    """Provide a fresh WorkerSpy."""
    from greeter.adapters.memory import WorkerSpy as WorkerSpyImpl

    return WorkerSpyImpl()
