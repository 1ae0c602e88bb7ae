"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[greeter]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeter.default_text must be a string")
        >>> str(err)
        'greeter.default_text must be a string'
    """


class InvalidTextError(TypeError):
    """A greeting was requested with something that is not text.

    Passing ``None`` or any other non-``str`` value violates the greeting
    precondition. Inherits from TypeError so generic ``except TypeError``
    handlers still see it.

    Example:
        >>> from greeter.domain.errors import InvalidTextError
        >>> err = InvalidTextError("text must be str, got NoneType")
        >>> isinstance(err, TypeError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidTextError",
]
