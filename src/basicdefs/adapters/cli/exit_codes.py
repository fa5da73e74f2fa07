"""POSIX-conventional exit codes for CLI error paths.

Signals and unexpected exceptions are mapped by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    Values follow errno (22 = EINVAL) and sysexits.h (78 = EX_CONFIG).

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
