"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that never touch the
filesystem, the console, or the logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.worker` - Recording greeting workers (WorkerSpy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_greeting_config_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .worker import RecordingWorker, WorkerSpy

if TYPE_CHECKING:
    from greeter.application.ports import (
        CreateWorker,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadGreetingConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_greeting_config: LoadGreetingConfigFromDict = load_greeting_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_create_worker: CreateWorker = WorkerSpy()

__all__ = [
    "RecordingWorker",
    "WorkerSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_greeting_config_from_dict_in_memory",
]
