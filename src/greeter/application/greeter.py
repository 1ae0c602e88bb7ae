"""Greeting facade: the public "print a greeting" use case.

The facade owns no output channel itself. For every call it obtains a fresh
worker from the injected factory, hands the text over unchanged, and
releases the worker before returning.

Contents:
    * :class:`Greeter` - Facade delegating each greeting to a scoped worker.
"""

from __future__ import annotations

import logging

from ..domain.behaviors import ensure_text
from .ports import CreateWorker

logger = logging.getLogger(__name__)


class Greeter:
    """Public entry point for the greeting capability.

    Args:
        create_worker: Factory returning a new :class:`~greeter.application.ports.GreetingWorker`.
            Called once per :meth:`greet`; the worker never outlives the call.

    Example:
        >>> from greeter.adapters.memory import WorkerSpy
        >>> spy = WorkerSpy()
        >>> Greeter(spy).greet("Hello, world!")
        >>> spy.output
        'Hello, world!\\n'
        >>> spy.created, spy.released
        (1, 1)
    """

    __slots__ = ("_create_worker",)

    def __init__(self, create_worker: CreateWorker) -> None:
        self._create_worker = create_worker

    def greet(self, text: str) -> None:
        """Write *text* followed by one line terminator through a scoped worker.

        Args:
            text: Any string, including the empty string. Passed on unchanged.

        Raises:
            InvalidTextError: If *text* is not a ``str``. No worker is created.
        """
        ensure_text(text)
        logger.debug("Delegating greeting to worker", extra={"chars": len(text)})
        with self._create_worker() as worker:
            worker.greet(text)


__all__ = ["Greeter"]
