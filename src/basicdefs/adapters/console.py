"""Console helpers writing values to stdout and stderr.

The only helpers in the package with side effects. Output goes through
``click.echo`` so it behaves like every CLI command under ``CliRunner``
and honours the active terminal encoding.

Contents:
    * :func:`write` - write a value to stdout without a newline.
    * :func:`write_line` - write a value and a newline to stdout.
    * :func:`debug` - trace a value to stderr and pass it through.
"""

from __future__ import annotations

from typing import TypeVar

import click

T = TypeVar("T")

DEBUG_PREFIX = "debug:"


def write(value: object) -> None:
    """Write ``str(value)`` to stdout without a trailing newline."""
    click.echo(f"{value}", nl=False)


def write_line(value: object) -> None:
    """Write ``str(value)`` followed by a newline to stdout."""
    click.echo(f"{value}")


def debug(value: T) -> T:
    """Write ``debug:<value>`` to stderr and return ``value`` unchanged.

    Designed to be dropped into an expression without changing its result.

    Example:
        >>> debug(41) + 1  # doctest: +SKIP
        42
    """
    click.echo(f"{DEBUG_PREFIX}{value}", err=True)
    return value


__all__ = ["DEBUG_PREFIX", "debug", "write", "write_line"]
