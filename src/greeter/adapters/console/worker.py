"""Console worker writing greeting lines to standard output.

Contents:
    * :class:`ConsoleWorker` - Scoped writer for one or more greeting lines.
    * :func:`create_console_worker` - Factory satisfying the CreateWorker port.
"""

from __future__ import annotations

import sys
from types import TracebackType
from typing import TextIO

from greeter.domain.behaviors import ensure_text, render_line


class ConsoleWorker:
    """Write each greeting verbatim, followed by one newline, then flush.

    The stream is looked up when writing, not when the worker is built, so
    ``sys.stdout`` replacements (pytest ``capsys``, ``redirect_stdout``) are
    honoured. Write failures are not caught.

    Args:
        stream: Explicit text stream. ``None`` means the current ``sys.stdout``.

    Example:
        >>> with ConsoleWorker() as worker:
        ...     worker.greet("Hello, world!")
        Hello, world!
    """

    __slots__ = ("_stream", "_released")

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._released = False

    @property
    def released(self) -> bool:
        """Whether :meth:`close` has run."""
        return self._released

    def _target(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def greet(self, text: str) -> None:
        """Write *text* and one line terminator to the stream.

        Raises:
            InvalidTextError: If *text* is not a ``str``.
            ValueError: If the worker was already released.
        """
        ensure_text(text)
        if self._released:
            raise ValueError("I/O operation on a released worker")
        target = self._target()
        target.write(render_line(text))
        target.flush()

    def close(self) -> None:
        """Release the worker. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        self._stream = None

    def __enter__(self) -> ConsoleWorker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def create_console_worker() -> ConsoleWorker:
    """Return a fresh worker bound to the process's standard output."""
    return ConsoleWorker()


__all__ = ["ConsoleWorker", "create_console_worker"]
