"""CLI commands exposing the numeric, ordering and sequence helpers.

Contents:
    * :func:`cli_factorial` - Print ``factorial(N)``.
    * :func:`cli_quorem` - Print quotient and remainder.
    * :func:`cli_parity` - Print whether a number is even or odd.
    * :func:`cli_clamp` - Clamp a value into a range.
    * :func:`cli_naturals` - Dump the first natural numbers.
    * :func:`cli_dump` - Dump the given items.

Invalid arguments (negative factorial, zero divisor, inverted range) are
reported on stderr and exit with :attr:`ExitCode.INVALID_ARGUMENT`; a
malformed ``[basicdefs]`` section exits with :attr:`ExitCode.CONFIG_ERROR`.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from basicdefs.adapters.config.settings import load_helper_settings
from basicdefs.adapters.console import debug, write_line
from basicdefs.domain.enums import Parity
from basicdefs.domain.errors import ArgumentOutOfRangeError
from basicdefs.domain.infinite import naturals, positive
from basicdefs.domain.numeric import factorial, quotient_remainder
from basicdefs.domain.ordering import limit_in_range
from basicdefs.domain.streams import dump

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@contextmanager
def _exit_on_invalid_argument() -> Iterator[None]:
    try:
        yield
    except (ArgumentOutOfRangeError, ZeroDivisionError) as exc:
        logger.warning("Rejected invalid argument", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("factorial", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("n", type=int)
def cli_factorial(n: int) -> None:
    """Print N! (the product 1 * 2 * ... * N)."""
    with lib_log_rich.runtime.bind(job_id="cli-factorial", extra={"command": "factorial", "n": n}):
        logger.info("Computing factorial")
        with _exit_on_invalid_argument():
            write_line(factorial(n))


@click.command("quorem", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("x", type=int)
@click.argument("y", type=int)
def cli_quorem(x: int, y: int) -> None:
    """Print the quotient and remainder of X divided by Y."""
    with lib_log_rich.runtime.bind(job_id="cli-quorem", extra={"command": "quorem"}):
        logger.info("Computing quotient and remainder", extra={"x": x, "y": y})
        with _exit_on_invalid_argument():
            quotient, remainder = quotient_remainder(x, y)
        write_line(f"{quotient} {remainder}")


@click.command("parity", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("n", type=int)
def cli_parity(n: int) -> None:
    """Print 'even' or 'odd' for N."""
    with lib_log_rich.runtime.bind(job_id="cli-parity", extra={"command": "parity"}):
        write_line(Parity.of(n).value)


@click.command("clamp", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("x", type=int)
@click.argument("lo", type=int)
@click.argument("hi", type=int)
def cli_clamp(x: int, lo: int, hi: int) -> None:
    """Clamp X into the inclusive range [LO, HI]."""
    with lib_log_rich.runtime.bind(job_id="cli-clamp", extra={"command": "clamp"}):
        logger.info("Clamping value", extra={"x": x, "lo": lo, "hi": hi})
        with _exit_on_invalid_argument():
            write_line(limit_in_range(x, lo, hi))


@click.command("naturals", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--start", type=int, default=0, show_default=True, help="First number of the sequence")
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=None,
    help="How many numbers to print (default: basicdefs.naturals_count)",
)
@click.option("--positive", "positive_only", is_flag=True, default=False, help="Start at 1, ignoring --start")
@click.pass_context
def cli_naturals(ctx: click.Context, start: int, count: int | None, positive_only: bool) -> None:
    """Dump the first natural numbers."""
    cli_ctx = get_cli_context(ctx)
    if count is None:
        try:
            count = load_helper_settings(cli_ctx.config).naturals_count
        except ValidationError as exc:
            click.echo(f"Error: invalid [basicdefs] configuration: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    with lib_log_rich.runtime.bind(job_id="cli-naturals", extra={"command": "naturals", "count": count}):
        logger.info("Listing natural numbers", extra={"start": start, "positive": positive_only})
        source = positive() if positive_only else naturals(start)
        write_line(dump(itertools.islice(source, count)))


@click.command("dump", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("items", nargs=-1)
@click.option("--debug", "trace", is_flag=True, default=False, help="Also trace every item to stderr")
def cli_dump(items: tuple[str, ...], trace: bool) -> None:
    """Print ITEMS in debug-dump form: [ a, b, ]."""
    with lib_log_rich.runtime.bind(job_id="cli-dump", extra={"command": "dump", "items": len(items)}):
        source = (debug(item) for item in items) if trace else items
        write_line(dump(source))


__all__ = [
    "cli_clamp",
    "cli_dump",
    "cli_factorial",
    "cli_naturals",
    "cli_parity",
    "cli_quorem",
]
