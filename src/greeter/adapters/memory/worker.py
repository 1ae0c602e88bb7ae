"""In-memory greeting workers for testing.

Contents:
    * :class:`RecordingWorker` - Worker that appends lines to a list.
    * :class:`WorkerSpy` - Worker factory that records every worker it hands out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

from greeter.domain.behaviors import ensure_text, render_line


class RecordingWorker:
    """Worker that records lines instead of writing to a stream.

    Args:
        sink: Shared list receiving each rendered line.
        raise_exception: When set, ``greet`` raises it instead of recording.
    """

    __slots__ = ("_sink", "_raise_exception", "released")

    def __init__(self, sink: list[str], raise_exception: BaseException | None = None) -> None:
        self._sink = sink
        self._raise_exception = raise_exception
        self.released = False

    def greet(self, text: str) -> None:
        ensure_text(text)
        if self.released:
            raise ValueError("I/O operation on a released worker")
        if self._raise_exception is not None:
            raise self._raise_exception
        self._sink.append(render_line(text))

    def close(self) -> None:
        self.released = True

    def __enter__(self) -> RecordingWorker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _empty_lines() -> list[str]:
    return []


def _empty_workers() -> list[RecordingWorker]:
    return []


@dataclass
class WorkerSpy:
    """Captures greetings for test assertions.

    Calling the spy returns a fresh :class:`RecordingWorker`, so an instance
    satisfies the ``CreateWorker`` port. Each test should use its own spy.

    Attributes:
        lines: Rendered lines in call order (text plus newline).
        workers: Every worker handed out, in creation order.
        raise_exception: When set, workers raise it on ``greet``.

    Example:
        >>> spy = WorkerSpy()
        >>> with spy() as worker:
        ...     worker.greet("A")
        >>> spy.lines, spy.released
        (['A\\n'], 1)
    """

    lines: list[str] = field(default_factory=_empty_lines)
    workers: list[RecordingWorker] = field(default_factory=_empty_workers)
    raise_exception: BaseException | None = None

    def __call__(self) -> RecordingWorker:
        worker = RecordingWorker(self.lines, raise_exception=self.raise_exception)
        self.workers.append(worker)
        return worker

    @property
    def output(self) -> str:
        """Everything written so far, as one string."""
        return "".join(self.lines)

    @property
    def created(self) -> int:
        return len(self.workers)

    @property
    def released(self) -> int:
        return sum(1 for worker in self.workers if worker.released)

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.lines.clear()
        self.workers.clear()
        self.raise_exception = None


__all__ = ["RecordingWorker", "WorkerSpy"]
