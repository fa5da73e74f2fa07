"""Integer arithmetic helpers: quotient/remainder, parity, operators, factorial.

Python integers are unbounded, so one function serves both the 32-bit and
64-bit callers and no result wraps around. Division and modulo follow Python
floor semantics and raise ``ZeroDivisionError`` for a zero divisor.

Contents:
    * :func:`quotient_remainder`, :func:`divides`, :func:`divided_by`
    * :func:`is_even`, :func:`is_odd`
    * uncurried operators :func:`plus` ... :func:`mod` and their curried
      ``*_by`` counterparts returning one-argument closures
    * :func:`factorial`, :func:`factorial_long`
"""

from __future__ import annotations

import functools
from collections.abc import Callable

from .errors import ArgumentOutOfRangeError


def quotient_remainder(x: int, y: int) -> tuple[int, int]:
    """Return ``(x // y, x % y)``.

    Raises:
        ZeroDivisionError: If ``y == 0``.

    Example:
        >>> quotient_remainder(7, 2)
        (3, 1)
    """
    return divmod(x, y)


def divides(n: int, m: int) -> bool:
    """Return whether ``n`` evenly divides ``m``.

    Example:
        >>> divides(3, 12), divides(5, 12)
        (True, False)
    """
    return m % n == 0


def divided_by(n: int, m: int) -> bool:
    """Return whether ``n`` is evenly divisible by ``m``.

    Example:
        >>> divided_by(12, 3)
        True
    """
    return n % m == 0


def is_even(n: int) -> bool:
    """Return whether ``n`` is divisible by two."""
    return divided_by(n, 2)


def is_odd(n: int) -> bool:
    """Return whether ``n`` is not divisible by two."""
    return not divided_by(n, 2)


def inc(i: int) -> int:
    return i + 1


def dec(i: int) -> int:
    return i - 1


def plus(i: int, j: int) -> int:
    return i + j


def minus(i: int, j: int) -> int:
    return i - j


def multiply(i: int, j: int) -> int:
    return i * j


def divide(i: int, j: int) -> int:
    """Integer quotient ``i // j``; raises ``ZeroDivisionError`` when ``j == 0``."""
    return i // j


def mod(i: int, j: int) -> int:
    """Remainder ``i % j``; raises ``ZeroDivisionError`` when ``j == 0``."""
    return i % j


def _curry(op: Callable[[int, int], int], j: int) -> Callable[[int], int]:
    """Fix the right operand of ``op``."""

    def _applied(i: int) -> int:
        return op(i, j)

    return _applied


def plus_by(j: int) -> Callable[[int], int]:
    """Return ``i -> i + j``.

    Example:
        >>> plus_by(3)(4)
        7
    """
    return _curry(plus, j)


def minus_by(j: int) -> Callable[[int], int]:
    """Return ``i -> i - j``."""
    return _curry(minus, j)


def multiply_by(j: int) -> Callable[[int], int]:
    """Return ``i -> i * j``."""
    return _curry(multiply, j)


def divide_by(j: int) -> Callable[[int], int]:
    """Return ``i -> i // j``.

    The division by zero surfaces when the returned function is called.

    Example:
        >>> divide_by(4)(17)
        4
    """
    return _curry(divide, j)


def mod_by(j: int) -> Callable[[int], int]:
    """Return ``i -> i % j``."""
    return _curry(mod, j)


def factorial(n: int) -> int:
    """Return ``1 * 2 * ... * n``; ``factorial(0) == 1``.

    Raises:
        ArgumentOutOfRangeError: If ``n`` is negative.

    Example:
        >>> factorial(5)
        120
    """
    if n < 0:
        raise ArgumentOutOfRangeError(f"factorial is undefined for negative numbers: {n}")
    return functools.reduce(multiply, range(1, n + 1), 1)


factorial_long = factorial


__all__ = [
    "dec",
    "divide",
    "divide_by",
    "divided_by",
    "divides",
    "factorial",
    "factorial_long",
    "inc",
    "is_even",
    "is_odd",
    "minus",
    "minus_by",
    "mod",
    "mod_by",
    "multiply",
    "multiply_by",
    "plus",
    "plus_by",
    "quotient_remainder",
]
