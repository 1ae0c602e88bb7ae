"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.greeter` - The greeting facade use case
    * :mod:`.ports` - Protocol definitions for adapter implementations
"""

from __future__ import annotations

from .greeter import Greeter
from .ports import (
    CreateWorker,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    GreetingWorker,
    InitLogging,
    LoadGreetingConfigFromDict,
)

__all__ = [
    "CreateWorker",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greeter",
    "GreetingWorker",
    "InitLogging",
    "LoadGreetingConfigFromDict",
]
