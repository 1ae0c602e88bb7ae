"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational: ``lib_cli_exit_tools``
translates signals and ``BrokenPipeError`` into them; the application never
raises ``SystemExit`` with these values itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the greeter CLI.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
        >>> ExitCode.BROKEN_PIPE
        <ExitCode.BROKEN_PIPE: 141>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
