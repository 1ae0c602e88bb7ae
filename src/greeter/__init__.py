"""Public package surface exposing the greeting facade, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: greeting text rules and errors
- Application exports: the Greeter facade
- Adapter exports: the console worker
- Composition exports: wired services (``greet``, configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.console import ConsoleWorker

# Application exports
from .application import Greeter

# Composition exports (wired adapters)
from .composition import get_config, greet

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .domain.errors import ConfigurationError, InvalidTextError

__all__ = [
    "CANONICAL_GREETING",
    "ConfigurationError",
    "ConsoleWorker",
    "Greeter",
    "InvalidTextError",
    "build_greeting",
    "get_config",
    "greet",
    "print_info",
]
