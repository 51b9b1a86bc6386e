"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; the ``LAYEREDCONF_*`` identifiers decide
where lib_layered_config looks for configuration files on each platform.

Contents:
    * Metadata constants (name, title, version, ...).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "greeter"
title = "Greets a person and reports their age against a fixed reference year"
version = "1.0.0"
homepage = "https://github.com/bitranox/greeter"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "greeter"

#: Vendor, application and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: str = "bitranox"
LAYEREDCONF_APP: str = "Greeter"
LAYEREDCONF_SLUG: str = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
