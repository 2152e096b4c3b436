"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; the version line is kept in sync on release.

Contents:
    * Project metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers used to locate configuration files.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "greeter"
title = "Prints the two canonical greetings to standard output"
version = "1.0.0"
homepage = ""
author = "greeter contributors"
author_email = ""
shell_command = "greeter"

#: Vendor, application and slug identifiers for lib_layered_config path discovery.
LAYEREDCONF_VENDOR = "greeter"
LAYEREDCONF_APP = "greeter"
LAYEREDCONF_SLUG = "greeter"


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
