"""prelude: a prelude.ls style toolkit of pure list utilities.

Absent results (empty input, no match) are returned as None. Misuse, such as
passing a non-callable where a function is expected, raises
``InvalidArgument``.
"""

from prelude.core.enums import TypeTag
from prelude.core.types import InvalidArgument
from prelude.functional import (
    each,
    filter,
    find,
    get_type,
    head,
    id,
    is_type,
    len,
    map,
    maximum,
    mean,
    minimum,
    product,
    reject,
    reverse,
    sort,
    sum,
    tail,
    take,
    unique,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "TypeTag",
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
