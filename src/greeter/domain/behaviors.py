"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .errors import InvalidTextError

CANONICAL_GREETING = "Hello World"

LINE_TERMINATOR = "\n"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Provides the text the ``hello`` command falls back to when no
    ``[greeter].default_text`` is configured.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello World'
    """
    return CANONICAL_GREETING


def ensure_text(text: object) -> str:
    """Return *text* unchanged when it is a ``str``, otherwise raise.

    Any sequence of characters is acceptable, including the empty string.
    Everything else (``None``, ``bytes``, numbers) is a usage error.

    Raises:
        InvalidTextError: If *text* is not a ``str``.

    Examples:
        >>> ensure_text("")
        ''
        >>> ensure_text(None)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidTextError: text must be str, got NoneType
    """
    if not isinstance(text, str):
        raise InvalidTextError(f"text must be str, got {type(text).__name__}")
    return text


def render_line(text: str) -> str:
    r"""Return the exact characters written for *text*.

    Examples:
        >>> render_line("Hello, world!")
        'Hello, world!\n'
        >>> render_line("line1\nline2")
        'line1\nline2\n'
    """
    return text + LINE_TERMINATOR


__all__ = [
    "CANONICAL_GREETING",
    "LINE_TERMINATOR",
    "build_greeting",
    "ensure_text",
    "render_line",
]
