"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.greeting import load_greeting_config_from_dict
from ..adapters.config.loader import get_config, get_default_config_path

# Greeting output
from ..adapters.console.worker import create_console_worker

# Logging services
from ..adapters.logging.setup import init_logging
from ..application.greeter import Greeter

# Static conformance assertions, checked by pyright only.
if TYPE_CHECKING:
    from ..adapters.memory.worker import WorkerSpy
    from ..application.ports import (
        CreateWorker,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadGreetingConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeting_config_from_dict: LoadGreetingConfigFromDict = load_greeting_config_from_dict
    _assert_init_logging: InitLogging = init_logging
    _assert_create_worker: CreateWorker = create_console_worker


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_greeting_config_from_dict: LoadGreetingConfigFromDict
    init_logging: InitLogging
    create_worker: CreateWorker

    def greeter(self) -> Greeter:
        """Return a facade bound to this container's worker factory."""
        return Greeter(self.create_worker)


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_greeting_config_from_dict=load_greeting_config_from_dict,
        init_logging=init_logging,
        create_worker=create_console_worker,
    )


def build_testing(*, spy: WorkerSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional WorkerSpy capturing greetings. When None, a fresh
            spy is created. Pass your own to assert on captured output.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        WorkerSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_greeting_config_from_dict_in_memory,
    )

    worker_spy = spy if spy is not None else WorkerSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_greeting_config_from_dict=load_greeting_config_from_dict_in_memory,
        init_logging=init_logging_in_memory,
        create_worker=worker_spy,
    )


def greet(text: str) -> None:
    r"""Write *text* and one newline to standard output.

    One-call public API: builds a production :class:`Greeter` and greets once.

    Raises:
        InvalidTextError: If *text* is not a ``str``.

    Example:
        >>> greet("Hello, world!")
        Hello, world!
    """
    Greeter(create_console_worker).greet(text)


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeting_config_from_dict",
    # Logging
    "init_logging",
    # Greeting
    "create_console_worker",
    "greet",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
