"""Sequence helpers over arbitrary (possibly lazy) iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
R = TypeVar("R")

_MISSING = object()


def is_empty(seq: Iterable[Any]) -> bool:
    """Return ``True`` when ``seq`` yields no element.

    No length is assumed, so generators work. A single-pass iterator loses at
    most the one element needed to answer.

    Example:
        >>> is_empty([]), is_empty(x for x in range(3))
        (True, False)
    """
    return next(iter(seq), _MISSING) is _MISSING


def to_array(*items: T) -> tuple[T, ...]:
    """Collect the positional arguments into a fixed-size tuple.

    Example:
        >>> to_array(1, 2, 3)
        (1, 2, 3)
    """
    return items


def to_list(*items: T) -> list[T]:
    """Collect the positional arguments into a new list.

    Example:
        >>> to_list("a", "b")
        ['a', 'b']
    """
    return list(items)


def contains(x: T, source: Iterable[T]) -> bool:
    """Return ``True`` if any element of ``source`` compares equal to ``x``.

    Example:
        >>> contains(2, iter([1, 2, 3]))
        True
    """
    return any(item == x for item in source)


def dump(source: Iterable[Any]) -> str:
    """Render ``source`` as ``"[ e1, e2, ]"`` for debug output.

    Every element is followed by ``", "``, including the last one.

    Example:
        >>> dump([1, "two", None])
        '[ 1, two, None, ]'
        >>> dump([])
        '[ ]'
    """
    return "[ " + "".join(f"{item}, " for item in source) + "]"


def times(n: int, action: Callable[[], Any]) -> None:
    """Invoke ``action`` ``n`` times in order; ``n <= 0`` invokes it never.

    Example:
        >>> calls = []
        >>> times(3, lambda: calls.append("hit"))
        >>> calls
        ['hit', 'hit', 'hit']
    """
    for _ in range(n):
        action()


def produce(n: int, producer: Callable[[], T]) -> Iterator[T]:
    """Lazily yield ``n`` fresh results of ``producer``.

    ``producer`` runs once per element pulled, never ahead of consumption.
    The generator is one-shot; call :func:`produce` again to restart.

    Example:
        >>> list(produce(3, lambda: 7))
        [7, 7, 7]
    """
    for _ in range(n):
        yield producer()


def zip2(a: Iterable[T1], b: Iterable[T2]) -> Iterator[tuple[T1, T2]]:
    """Pair up elements positionally, stopping at the shorter source.

    Example:
        >>> list(zip2([1, 2, 3], ["a", "b"]))
        [(1, 'a'), (2, 'b')]
    """
    return zip(a, b)


def zip3(a: Iterable[T1], b: Iterable[T2], c: Iterable[T3]) -> Iterator[tuple[T1, T2, T3]]:
    """Group elements positionally into triples, stopping at the shortest source."""
    return zip(a, b, c)


def zip3_with(
    a: Iterable[T1],
    b: Iterable[T2],
    c: Iterable[T3],
    f: Callable[[T1, T2, T3], R],
) -> Iterator[R]:
    """Yield ``f(x, y, z)`` for positional triples of the three sources.

    Sources are advanced in order ``a``, ``b``, ``c`` and iteration stops as
    soon as one of them is exhausted.

    Example:
        >>> list(zip3_with([1, 2], [10, 20], [100, 200, 300], lambda x, y, z: x + y + z))
        [111, 222]
    """
    for x, y, z in zip(a, b, c):
        yield f(x, y, z)


__all__ = [
    "contains",
    "dump",
    "is_empty",
    "produce",
    "times",
    "to_array",
    "to_list",
    "zip2",
    "zip3",
    "zip3_with",
]
