"""CLI command implementations.

Contents:
    * Greeting commands from :mod:`.greet_cmd`
    * Info and failure commands from :mod:`.info`
    * Config command from :mod:`.config`
    * Logging demo from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .greet_cmd import cli_greet, cli_hello
from .info import cli_fail, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_fail",
    "cli_greet",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
