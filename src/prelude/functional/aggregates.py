"""Numeric and ordering reductions over sequences.

Note:
    ``product`` of an empty sequence is ``0``, not the multiplicative
    identity. ``mean`` of an empty sequence is None. ``minimum`` and
    ``maximum`` require at least one element and raise ``InvalidArgument``
    otherwise.
"""

import typing as tp
from collections.abc import Sequence

from prelude.core.types import require_non_empty, require_sequence
from prelude.functional.sequences import len

__all__ = [
    "sum",
    "product",
    "mean",
    "minimum",
    "maximum",
]


def sum(seq: Sequence) -> tp.Any:
    """Add up the values in ``seq``. An empty sequence sums to ``0``."""
    seq = require_sequence(seq)
    total = 0
    for x in seq:
        total = total + x
    return total


def product(seq: Sequence) -> tp.Any:
    """Multiply the values in ``seq``. An empty sequence yields ``0``."""
    seq = require_sequence(seq)
    if not seq:
        return 0
    result = 1
    for x in seq:
        result = result * x
    return result


def mean(seq: Sequence) -> tp.Any:
    """Arithmetic mean of ``seq``, or None when it is empty."""
    seq = require_sequence(seq)
    if not seq:
        return None
    return sum(seq) / len(seq)


def minimum(seq: Sequence) -> tp.Any:
    """Smallest element of a non-empty sequence.

    Scans left to right from the first element, replacing the current
    minimum only on a strict ``<``, so the first of several equal minima is
    returned.

    Raises:
        InvalidArgument: If ``seq`` is empty or not a sequence.
    """
    seq = require_non_empty(seq)
    smallest = seq[0]
    for x in seq[1:]:
        if x < smallest:
            smallest = x
    return smallest


def maximum(seq: Sequence) -> tp.Any:
    """Largest element of a non-empty sequence. Mirror image of ``minimum``."""
    seq = require_non_empty(seq)
    largest = seq[0]
    for x in seq[1:]:
        if x > largest:
            largest = x
    return largest
