"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ArgumentOutOfRangeError(ValueError):
    """An argument lies outside the range its operation accepts.

    Base class for the range failures raised by the ordering helpers.
    Inherits from ValueError so generic ``except ValueError`` handlers
    keep catching it.

    Example:
        >>> from basicdefs.domain.errors import ArgumentOutOfRangeError
        >>> err = ArgumentOutOfRangeError("x must be positive")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidRangeError(ArgumentOutOfRangeError):
    """Range bounds given with the lower bound above the upper bound.

    Raised by :func:`~basicdefs.domain.ordering.in_range` and friends before
    any membership test takes place.

    Example:
        >>> from basicdefs.domain.errors import InvalidRangeError
        >>> err = InvalidRangeError("invalid range: 10 > 1")
        >>> str(err)
        'invalid range: 10 > 1'
        >>> isinstance(err, ArgumentOutOfRangeError)
        True
    """


class OutOfRangeError(ArgumentOutOfRangeError):
    """A value falls outside a valid inclusive range.

    Example:
        >>> from basicdefs.domain.errors import OutOfRangeError
        >>> err = OutOfRangeError("11 is not in [1, 10]")
        >>> str(err)
        '11 is not in [1, 10]'
    """


__all__ = [
    "ArgumentOutOfRangeError",
    "InvalidRangeError",
    "OutOfRangeError",
]
