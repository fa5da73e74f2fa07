"""Domain layer - pure helper functions with no I/O or framework dependencies.

Contents:
    * :mod:`.combinators` - identity, constant, composition, flip, saturate
    * :mod:`.streams` - sequence helpers and zipping
    * :mod:`.infinite` - unbounded natural-number sequences
    * :mod:`.ordering` - comparisons, range checks and clamps
    * :mod:`.numeric` - integer arithmetic helpers
    * :mod:`.enums` - Domain enumerations (OutputFormat, Parity)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .combinators import call, call_times, compose, constant, flip, identity, saturate, then
from .enums import OutputFormat, Parity
from .errors import ArgumentOutOfRangeError, InvalidRangeError, OutOfRangeError
from .infinite import naturals, positive
from .numeric import (
    dec,
    divide,
    divide_by,
    divided_by,
    divides,
    factorial,
    factorial_long,
    inc,
    is_even,
    is_odd,
    minus,
    minus_by,
    mod,
    mod_by,
    multiply,
    multiply_by,
    plus,
    plus_by,
    quotient_remainder,
)
from .ordering import (
    Comparable,
    clamp,
    clamp_max,
    clamp_min,
    compare,
    ensure_in_range,
    eq,
    ge,
    greater_of,
    gt,
    in_range,
    le,
    lesser_of,
    limit_in_range,
    lt,
    max_of,
    min_of,
    ne,
)
from .streams import contains, dump, is_empty, produce, times, to_array, to_list, zip2, zip3, zip3_with

__all__ = [
    # Combinators
    "call",
    "call_times",
    "compose",
    "constant",
    "flip",
    "identity",
    "saturate",
    "then",
    # Streams
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
    # Infinite sequences
    "naturals",
    "positive",
    # Ordering
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
    # Numeric
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
    # Enums
    "OutputFormat",
    "Parity",
    # Errors
    "ArgumentOutOfRangeError",
    "InvalidRangeError",
    "OutOfRangeError",
]
