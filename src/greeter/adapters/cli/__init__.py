"""CLI package providing the command-line interface.

Acts as the public facade for the CLI subsystem; consumers import from here
and stay insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_fail,
    cli_greet,
    cli_hello,
    cli_info,
    cli_logdemo,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Context and traceback management
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
    # Root command and entry point
    "cli",
    "main",
    # Commands
    "cli_config",
    "cli_fail",
    "cli_greet",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
