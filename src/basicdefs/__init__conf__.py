"""Static package metadata surfaced to CLI commands and documentation.

Kept as plain module-level constants so the CLI can report them without
importing packaging machinery. ``version`` is synced from pyproject.toml.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers used by :mod:`lib_layered_config`.
    * :func:`print_info` - render the metadata for the ``info`` command.
"""

from __future__ import annotations

name = "basicdefs"
title = "Generic functional, sequence, ordering and numeric helpers"
version = "1.0.0"
author = "basicdefs maintainers"
shell_command = "basicdefs"

#: Vendor, application and slug identifiers for configuration file discovery.
LAYEREDCONF_VENDOR: str = "basicdefs"
LAYEREDCONF_APP: str = "basicdefs"
LAYEREDCONF_SLUG: str = "basicdefs"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for basicdefs:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
