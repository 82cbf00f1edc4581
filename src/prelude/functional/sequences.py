"""List operations over ordered sequences.

Every function here is pure: inputs are never mutated and transforming
operations return a new ``list``. Higher-order functions validate their
callable argument before visiting any element and raise
``InvalidArgument`` on misuse. Absence (empty input, no match) is reported
as ``None`` rather than an error.

Several names intentionally mirror builtins (``filter``, ``map``, ``len``,
``id``). Builtins are reached through the ``builtins`` module inside this
file.

Examples:
    >>> from prelude.functional.sequences import filter, map, unique
    >>> map(lambda x: x * x, [1, 2, 3])
    [1, 4, 9]
    >>> filter(lambda x: x % 2 == 0, [1, 2, 3, 4])
    [2, 4]
    >>> unique([1, 2, 1, 3, 2])
    [1, 3, 2]
"""

import builtins
import typing as tp
from collections.abc import Sequence

from prelude.core.types import (
    UnaryFn,
    require_callable,
    require_count,
    require_sequence,
)

__all__ = [
    "each",
    "filter",
    "reject",
    "map",
    "find",
    "head",
    "tail",
    "take",
    "len",
    "reverse",
    "sort",
    "unique",
    "id",
]


def each(fn: UnaryFn, seq: Sequence) -> Sequence:
    """Call ``fn`` on every element for its side effects.

    Args:
        fn: Unary callable; its return value is discarded.
        seq: Input sequence.

    Returns:
        ``seq`` itself, unchanged.

    Raises:
        InvalidArgument: If ``fn`` is not callable or ``seq`` is not a sequence.
    """
    fn = require_callable(fn)
    seq = require_sequence(seq)
    for x in seq:
        fn(x)
    return seq


def filter(fn: UnaryFn, seq: Sequence) -> list:
    """Keep the elements for which ``fn`` is truthy, in their original order."""
    fn = require_callable(fn)
    seq = require_sequence(seq)
    return [x for x in seq if fn(x)]


def reject(fn: UnaryFn, seq: Sequence) -> list:
    """Keep the elements for which ``fn`` is falsy, in their original order."""
    fn = require_callable(fn)
    seq = require_sequence(seq)
    return [x for x in seq if not fn(x)]


def map(fn: UnaryFn, seq: Sequence) -> list:
    """Apply ``fn`` to each element. The result has the same length as ``seq``."""
    fn = require_callable(fn)
    seq = require_sequence(seq)
    return [fn(x) for x in seq]


def find(fn: UnaryFn, seq: Sequence) -> tp.Any:
    """Return the first element that passes ``fn``.

    ``fn`` is not called on elements after the first match.

    Returns:
        The matching element, or None if nothing matches or ``seq`` is empty.
    """
    fn = require_callable(fn)
    seq = require_sequence(seq)
    for x in seq:
        if fn(x):
            return x
    return None


def head(seq: Sequence) -> tp.Any:
    """First element, or None for an empty sequence."""
    seq = require_sequence(seq)
    if not seq:
        return None
    return seq[0]


def tail(seq: Sequence) -> list | None:
    """Everything but the first element, or None for an empty sequence."""
    seq = require_sequence(seq)
    if not seq:
        return None
    return list(seq[1:])


def take(n: int, seq: Sequence) -> list:
    """Return the first ``n`` elements.

    Args:
        n: Number of elements to take. Values ``<= 0`` yield an empty list.
        seq: Input sequence.

    Returns:
        A list of ``min(n, len(seq))`` elements (empty when ``n <= 0``).

    Raises:
        InvalidArgument: If ``n`` is not an integer (``bool`` included) or
            ``seq`` is not a sequence.
    """
    n = require_count(n)
    seq = require_sequence(seq)
    if n <= 0:
        return []
    return list(seq[:n])


def len(seq: Sequence) -> int:
    seq = require_sequence(seq)
    return builtins.len(seq)


def reverse(seq: Sequence) -> list:
    seq = require_sequence(seq)
    return list(reversed(seq))


def sort(seq: Sequence) -> list:
    """Sort ascending with first-element-pivot quicksort.

    Each partition is split around its first element into ``x < pivot`` and
    ``x >= pivot`` and reassembled as ``less + [pivot] + greater_or_equal``.
    Partitions are processed from an explicit stack, so already-sorted input
    does not exhaust the interpreter's recursion limit. Equal elements keep
    their relative order under this scheme.

    Args:
        seq: Sequence of mutually comparable elements.

    Returns:
        A new ascending list. ``seq`` is not modified.
    """
    seq = require_sequence(seq)
    result = []
    # Stack entries are either a partition to split or a placed pivot.
    # Pushing greater_or_equal, pivot, less (in that order) pops them back
    # in ascending order.
    stack: list[tuple[bool, tp.Any]] = [(False, list(seq))]
    while stack:
        is_pivot, item = stack.pop()
        if is_pivot:
            result.append(item)
            continue
        if not item:
            continue
        pivot, rest = item[0], item[1:]
        # Everything not strictly less goes right, so unordered values
        # such as NaN are kept.
        less = [x for x in rest if x < pivot]
        greater_or_equal = [x for x in rest if not x < pivot]
        stack.append((False, greater_or_equal))
        stack.append((True, pivot))
        stack.append((False, less))
    return result


def unique(seq: Sequence) -> list:
    """Remove duplicate values, keeping each value at its last occurrence.

    Elements are scanned in order. When a value that was already seen turns
    up again, its earlier entry is removed from the result and the value is
    appended at the current position. Membership is tested with ``==`` so
    unhashable elements are supported. Values equal across types count as
    one value: ``unique([1, 1.0, True])`` is ``[True]``.

    Examples:
        >>> unique([1, 2, 1, 3, 2])
        [1, 3, 2]
    """
    seq = require_sequence(seq)
    seen = []
    result = []
    for x in seq:
        if x in seen:
            result.remove(x)
        else:
            seen.append(x)
        result.append(x)
    return result


def id(x: tp.Any) -> tp.Any:
    """Return ``x`` unchanged. Useful as a placeholder transform."""
    return x
