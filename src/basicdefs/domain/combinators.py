"""Functional combinators: identity, constants, composition and iteration.

Every combinator is pure. Functions passed in are called exactly as the
contract states, so errors raised by them propagate unchanged.

Contents:
    * :func:`identity` / :func:`constant` - trivial value combinators.
    * :func:`then` / :func:`compose` - forward and backward composition.
    * :func:`call` / :func:`call_times` - pipeline-style application.
    * :func:`flip` - swap the arguments of a binary callable.
    * :func:`saturate` - fixed-point iteration.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


def identity(value: T) -> T:
    """Return ``value`` unchanged.

    Example:
        >>> identity(42)
        42
    """
    return value


def constant(value: T) -> Callable[[Any], T]:
    """Return a function that ignores its argument and always yields ``value``.

    Example:
        >>> always_seven = constant(7)
        >>> always_seven("anything"), always_seven(None)
        (7, 7)
    """

    def _constant(_: Any) -> T:
        return value

    return _constant


def then(f: Callable[[S], T], g: Callable[[T], U]) -> Callable[[S], U]:
    """Compose left to right: the result computes ``g(f(x))``.

    Example:
        >>> then(lambda x: x + 1, lambda x: x * 10)(2)
        30
    """

    def _then(x: S) -> U:
        return g(f(x))

    return _then


def compose(f: Callable[[T], U], g: Callable[[S], T]) -> Callable[[S], U]:
    """Compose right to left: the result computes ``f(g(x))``.

    Example:
        >>> compose(lambda x: x + 1, lambda x: x * 10)(2)
        21
    """

    def _compose(x: S) -> U:
        return f(g(x))

    return _compose


def call(value: S, f: Callable[[S], T]) -> T:
    """Apply ``f`` to ``value`` (argument first, for pipeline-style chaining).

    Side-effecting callables work too; their ``None`` is passed through.

    Example:
        >>> call(3, str)
        '3'
    """
    return f(value)


def call_times(value: T, f: Callable[[T], T], times: int) -> T:
    """Apply ``f`` to ``value`` repeatedly, ``times`` times.

    ``times == 0`` returns ``value`` unchanged. A negative count performs no
    application either; no bounds check is made.

    Example:
        >>> call_times(1, lambda x: x * 2, 10)
        1024
    """
    for _ in range(times):
        value = f(value)
    return value


def flip(f: Callable[[S, T], U]) -> Callable[[T, S], U]:
    """Return ``f`` with its two positional arguments swapped.

    Example:
        >>> flip(lambda a, b: a - b)(1, 10)
        9
    """

    def _flipped(b: T, a: S) -> U:
        return f(a, b)

    return _flipped


def saturate(init: T, f: Callable[[T], T]) -> T:
    """Iterate ``f`` from ``init`` until it stops changing its input.

    Equality is ``==`` on the element type. There is no iteration cap or
    cycle detection: a function without a reachable fixed point never
    returns.

    Args:
        init: Starting value.
        f: Step function.

    Returns:
        The first value ``v`` in the orbit of ``init`` with ``f(v) == v``.

    Example:
        >>> saturate(100, lambda x: x // 2 if x > 3 else x)
        3
    """
    current = init
    while True:
        following = f(current)
        if following == current:
            return current
        current = following


__all__ = [
    "call",
    "call_times",
    "compose",
    "constant",
    "flip",
    "identity",
    "saturate",
    "then",
]
