"""Greeting CLI commands.

Contents:
    * :func:`cli_greet` - Greet each TEXT argument.
    * :func:`cli_hello` - Greet the configured default text.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

# Records stay at DEBUG: stdout carries the greeting lines only.
logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("texts", nargs=-1, required=True, metavar="TEXT...")
@click.pass_context
def cli_greet(ctx: click.Context, texts: tuple[str, ...]) -> None:
    r"""Write each TEXT, followed by a newline, to standard output.

    Arguments are greeted one at a time in the order given. Nothing else is
    written to standard output. Put ``--`` before a TEXT that starts with a dash.

    \b
    Examples:
      greeter greet "Hello, world!"
      greeter greet A B
      greeter greet -- --not-an-option
    """
    cli_ctx = get_cli_context(ctx)
    greeter = cli_ctx.services.greeter()

    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "count": len(texts)}):
        logger.debug("Executing greet command", extra={"count": len(texts)})
        for text in texts:
            greeter.greet(text)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Greet the configured default text (``[greeter].default_text``)."""
    cli_ctx = get_cli_context(ctx)
    try:
        settings = cli_ctx.services.load_greeting_config_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.debug("Executing hello command")
        cli_ctx.services.greeter().greet(settings.default_text)


__all__ = ["cli_greet", "cli_hello"]
