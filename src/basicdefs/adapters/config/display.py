"""Render a loaded Config through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _render
from rich.console import Console

from basicdefs.domain.enums import OutputFormat

_LIB_FORMATS: dict[OutputFormat, LibOutputFormat] = {fmt: LibOutputFormat(fmt.value) for fmt in OutputFormat}


def _flush_pending_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config``, or just one ``section`` of it, to stdout.

    Queued log records are written out first so that the dump stays
    contiguous.

    Raises:
        ValueError: If ``section`` is not a top-level key of ``config``.
    """
    _flush_pending_logs()
    _render(config, output_format=_LIB_FORMATS[output_format], section=section, profile=profile, console=console)


__all__ = ["display_config"]
