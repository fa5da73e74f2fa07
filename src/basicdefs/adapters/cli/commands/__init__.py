"""CLI command implementations.

Collects all subcommand functions for registration with the root CLI group.

Contents:
    * Info commands from :mod:`.info`
    * Config command from :mod:`.config`
    * Helper commands from :mod:`.helpers`
"""

from __future__ import annotations

from .config import cli_config
from .helpers import cli_clamp, cli_dump, cli_factorial, cli_naturals, cli_parity, cli_quorem
from .info import cli_fail, cli_info

#: Registration order for the root group.
ALL_COMMANDS = (
    cli_info,
    cli_fail,
    cli_config,
    cli_factorial,
    cli_quorem,
    cli_parity,
    cli_clamp,
    cli_naturals,
    cli_dump,
)

__all__ = [
    "ALL_COMMANDS",
    "cli_clamp",
    "cli_config",
    "cli_dump",
    "cli_factorial",
    "cli_fail",
    "cli_info",
    "cli_naturals",
    "cli_parity",
    "cli_quorem",
]
