"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting text rules (canonical greeting, text precondition, line rendering)
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    LINE_TERMINATOR,
    build_greeting,
    ensure_text,
    render_line,
)
from .enums import OutputFormat
from .errors import ConfigurationError, InvalidTextError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "LINE_TERMINATOR",
    "build_greeting",
    "ensure_text",
    "render_line",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidTextError",
]
