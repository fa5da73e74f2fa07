"""Type-safe domain enums."""

from __future__ import annotations

from enum import Enum

from .numeric import is_even


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Parity(str, Enum):
    """Parity of an integer as reported by the ``parity`` command.

    Example:
        >>> Parity.of(4)
        <Parity.EVEN: 'even'>
        >>> Parity.of(-3).value
        'odd'
    """

    EVEN = "even"
    ODD = "odd"

    @classmethod
    def of(cls, n: int) -> Parity:
        """Return the parity of ``n``."""
        return cls.EVEN if is_even(n) else cls.ODD


__all__ = [
    "OutputFormat",
    "Parity",
]
