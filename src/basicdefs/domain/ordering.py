"""Helpers over totally ordered values: comparisons, ranges and clamps.

All helpers are generic over :class:`Comparable`, i.e. any type that supports
``<`` and ``>`` against itself. The relational aliases are derived from the
three-way :func:`compare` and keep their conventional meaning.

Range helpers validate their bounds first and raise
:class:`~basicdefs.domain.errors.InvalidRangeError` when ``lo > hi``.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from .errors import InvalidRangeError, OutOfRangeError


class Comparable(Protocol):
    """Structural bound for values with a total order."""

    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=Comparable)


def compare(x: C, y: C) -> int:
    """Three-way comparison: negative, zero or positive.

    Example:
        >>> compare(1, 2), compare(2, 2), compare("b", "a")
        (-1, 0, 1)
    """
    return int(x > y) - int(x < y)


def lt(x: C, y: C) -> bool:
    """``x < y``."""
    return compare(x, y) < 0


def le(x: C, y: C) -> bool:
    """``x <= y``."""
    return compare(x, y) <= 0


def eq(x: C, y: C) -> bool:
    """``x`` and ``y`` are equivalent in the ordering."""
    return compare(x, y) == 0


def ne(x: C, y: C) -> bool:
    """``x`` and ``y`` are not equivalent in the ordering."""
    return compare(x, y) != 0


def gt(x: C, y: C) -> bool:
    """``x > y``."""
    return compare(x, y) > 0


def ge(x: C, y: C) -> bool:
    """``x >= y``."""
    return compare(x, y) >= 0


def max_of(*xs: C) -> C:
    """Return the largest of one or more values.

    Raises:
        ValueError: If called without arguments.

    Example:
        >>> max_of(3, 9, 4)
        9
    """
    return max(xs)


def min_of(*xs: C) -> C:
    """Return the smallest of one or more values.

    Raises:
        ValueError: If called without arguments.
    """
    return min(xs)


def _check_range(lo: C, hi: C) -> None:
    if gt(lo, hi):
        raise InvalidRangeError(f"invalid range: lower bound {lo!r} is greater than upper bound {hi!r}")


def in_range(x: C, lo: C, hi: C) -> bool:
    """Return whether ``lo <= x <= hi``.

    Raises:
        InvalidRangeError: If ``lo > hi``, checked before membership.

    Example:
        >>> in_range(5, 1, 10)
        True
        >>> in_range(5, 10, 1)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidRangeError: invalid range...
    """
    _check_range(lo, hi)
    return le(lo, x) and ge(hi, x)


def ensure_in_range(x: C, lo: C, hi: C) -> C:
    """Return ``x`` unchanged if it lies within ``[lo, hi]``.

    Raises:
        InvalidRangeError: If ``lo > hi``.
        OutOfRangeError: If ``x`` lies outside ``[lo, hi]``.
    """
    if not in_range(x, lo, hi):
        raise OutOfRangeError(f"{x!r} is not in [{lo!r}, {hi!r}]")
    return x


def limit_in_range(x: C, lo: C, hi: C) -> C:
    """Clamp ``x`` into ``[lo, hi]``.

    Raises:
        InvalidRangeError: If ``lo > hi``.

    Example:
        >>> limit_in_range(-4, 0, 10), limit_in_range(4, 0, 10), limit_in_range(40, 0, 10)
        (0, 4, 10)
    """
    _check_range(lo, hi)
    return clamp_max(clamp_min(x, lo), hi)


clamp = limit_in_range


def greater_of(x: C, y: C) -> C:
    """Return the larger of two values; a tie returns ``y``."""
    return y if ge(y, x) else x


def lesser_of(x: C, y: C) -> C:
    """Return the smaller of two values; a tie returns ``y``."""
    return y if le(y, x) else x


def clamp_max(x: C, hi: C) -> C:
    """Cap ``x`` at ``hi``."""
    return hi if ge(x, hi) else x


def clamp_min(x: C, lo: C) -> C:
    """Raise ``x`` to at least ``lo``."""
    return lo if le(x, lo) else x


__all__ = [
    "Comparable",
    "clamp",
    "clamp_max",
    "clamp_min",
    "compare",
    "ensure_in_range",
    "eq",
    "ge",
    "greater_of",
    "gt",
    "in_range",
    "le",
    "lesser_of",
    "limit_in_range",
    "lt",
    "max_of",
    "min_of",
    "ne",
]
