"""Click context helpers and traceback state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State shared by the root group with every subcommand."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLIContext.

    Args:
        ctx: Click context of the root group.
        traceback: Whether ``--traceback`` was given.
        config: Configuration after ``--set`` overrides.
        services: Services built from the factory.
        profile: Root-level ``--profile`` value.
        set_overrides: Raw ``--set`` strings, kept so subcommands that reload
            configuration for another profile can reapply them.
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root group.

    Raises:
        RuntimeError: If the root group did not run first.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        False
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror ``--traceback`` into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`."""
    traceback_enabled, force_color = state
    lib_cli_exit_tools.config.traceback = traceback_enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
