"""Application ports: Protocol definitions for adapter implementations.

Each callable Protocol defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``GreetingConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.greeting import GreetingConfig


class GreetingWorker(Protocol):
    """A scoped resource that writes one greeting line per call.

    Workers are context managers: leaving the ``with`` block releases them,
    and a released worker refuses further writes.
    """

    def greet(self, text: str) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> GreetingWorker: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class CreateWorker(Protocol):
    """Create a fresh, unshared worker for a single greeting."""

    def __call__(self) -> GreetingWorker: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreetingConfigFromDict(Protocol):
    """Load GreetingConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateWorker",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "GreetingWorker",
    "InitLogging",
    "LoadGreetingConfigFromDict",
]
