"""Unbounded natural-number sequences."""

from __future__ import annotations

import itertools
from collections.abc import Iterator


def naturals(start: int = 0) -> Iterator[int]:
    """Return a fresh, unbounded counter ``start, start + 1, ...``.

    Each call starts over, so the sequence is restartable by re-invocation.

    Example:
        >>> list(itertools.islice(naturals(), 4))
        [0, 1, 2, 3]
    """
    return itertools.count(start)


def positive() -> Iterator[int]:
    """Return the naturals without zero.

    Example:
        >>> list(itertools.islice(positive(), 3))
        [1, 2, 3]
    """
    return itertools.islice(naturals(), 1, None)


__all__ = ["naturals", "positive"]
