"""CLI entry point and execution wrapper.

Shared by the console script and ``python -m greeter`` so both report
errors and exit codes identically.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import errno
import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _is_broken_pipe_exit(exc: BaseException) -> bool:
    """Return True for the ``SystemExit`` Click raises after stdout hit EPIPE.

    Click swallows the ``BrokenPipeError``, silences both streams, and calls
    ``sys.exit(1)`` while handling it, so the pipe error only survives as the
    exception context.

    Examples:
        >>> try:
        ...     try:
        ...         raise BrokenPipeError(errno.EPIPE, "Broken pipe")
        ...     except OSError:
        ...         sys.exit(1)
        ... except SystemExit as exc:
        ...     _is_broken_pipe_exit(exc)
        True
        >>> _is_broken_pipe_exit(SystemExit(1))
        False
    """
    if not isinstance(exc, SystemExit):
        return False
    context = exc.__context__
    return isinstance(context, OSError) and context.errno == errno.EPIPE


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate its outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot pass ``obj`` to Click, so its
    behaviour is reproduced here with the services factory as ``obj``.
    """
    import click

    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        if _is_broken_pipe_exit(exc):
            # Streams are already pacified; nothing more can be printed.
            return ExitCode.BROKEN_PIPE
        # Everything else (SystemExit, KeyboardInterrupt, BrokenPipeError, ...)
        # is rendered and mapped to an exit code by lib_cli_exit_tools.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: CLI arguments; ``None`` uses ``sys.argv[1:]``.
        restore_traceback: Restore the traceback flags that were active before the run.
        services_factory: Returns the AppServices for this run. Required;
            callers outside the adapters layer pass ``build_production``.

    Returns:
        Exit code reported by the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from greeter.composition import build_production
        >>> main(["greet", "Hello, world!"], services_factory=build_production)  # doctest: +SKIP
        Hello, world!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Other threads may still be logging; only the main thread tears the runtime down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
