"""Console adapter - greeting output on standard output.

Contents:
    * :mod:`.worker` - ConsoleWorker and its factory
"""

from __future__ import annotations

from .worker import ConsoleWorker, create_console_worker

__all__ = ["ConsoleWorker", "create_console_worker"]
