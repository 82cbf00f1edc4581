"""Functional primitives for prelude.

This package provides the list utilities of the prelude toolkit: mapping,
filtering, searching, aggregation, sorting, de-duplication and runtime type
inspection. Every function is stateless and side-effect-free (apart from the
callable handed to ``each``) so they can be composed freely.
"""

from prelude.functional.aggregates import maximum, mean, minimum, product, sum
from prelude.functional.reflection import get_type, is_type
from prelude.functional.sequences import (
    each,
    filter,
    find,
    head,
    id,
    len,
    map,
    reject,
    reverse,
    sort,
    tail,
    take,
    unique,
)

__all__ = [
    "each",
    "filter",
    "find",
    "get_type",
    "head",
    "id",
    "is_type",
    "len",
    "map",
    "maximum",
    "mean",
    "minimum",
    "product",
    "reject",
    "reverse",
    "sort",
    "sum",
    "tail",
    "take",
    "unique",
]
