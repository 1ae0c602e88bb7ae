"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` at release time, so runtime
code never needs ``importlib.metadata`` lookups (which fail for source
checkouts that were never installed).

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by :mod:`lib_layered_config`.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "greeter"
#: One-line summary shown as the CLI help title.
title: Final[str] = "Print a greeting: a facade that delegates a text value to a console worker"
#: Release version, synced from pyproject.toml.
version = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://pypi.org/project/greeter/"
#: Maintainer line.
author: Final[str] = "greeter maintainers"
#: Console script name registered in ``[project.scripts]``.
shell_command: Final[str] = "greeter"

#: Vendor, application, and slug identifiers for configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "greeter"
LAYEREDCONF_APP: Final[str] = "greeter"
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
