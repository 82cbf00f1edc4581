"""Lightweight runtime type inspection.

``get_type`` maps a value onto a closed set of categories (``TypeTag``) and
``is_type`` tests a value against a category name. Checks run in a fixed
order and the first match wins, so ``True`` is a ``boolean`` rather than an
``integer`` and an enum member is an ``atom`` even when it subclasses
``str``.
"""

import asyncio
import io
import multiprocessing.process
import numbers
import socket
import threading
import typing as tp
import weakref
from enum import Enum

from prelude.core.enums import TypeTag
from prelude.core.types import require_type_name

__all__ = [
    "get_type",
    "is_type",
]

_PROCESS_TYPES = (threading.Thread, multiprocessing.process.BaseProcess, asyncio.Task)
_PORT_TYPES = (io.IOBase, socket.socket)
_REFERENCE_TYPES = (weakref.ref, weakref.ProxyType, weakref.CallableProxyType)

# Ordered (predicate, tag) pairs.
_CLASSIFIERS: tuple[tuple[tp.Callable[[tp.Any], bool], TypeTag], ...] = (
    (lambda x: x is None or x is Ellipsis or isinstance(x, Enum), TypeTag.ATOM),
    (lambda x: isinstance(x, bool), TypeTag.BOOLEAN),
    (lambda x: isinstance(x, str), TypeTag.BITSTRING),
    (lambda x: isinstance(x, (bytes, bytearray, memoryview)), TypeTag.BINARY),
    (lambda x: isinstance(x, int), TypeTag.INTEGER),
    (lambda x: isinstance(x, float), TypeTag.FLOAT),
    (lambda x: isinstance(x, numbers.Number), TypeTag.NUMBER),
    (lambda x: isinstance(x, list), TypeTag.LIST),
    (lambda x: isinstance(x, tuple), TypeTag.TUPLE),
    (lambda x: isinstance(x, _PROCESS_TYPES), TypeTag.PID),
    (lambda x: isinstance(x, _PORT_TYPES), TypeTag.PORT),
    (lambda x: isinstance(x, _REFERENCE_TYPES), TypeTag.REFERENCE),
    (callable, TypeTag.FUNCTION),
)


def get_type(x: tp.Any) -> TypeTag:
    """Classify ``x`` into a runtime type category.

    Args:
        x: Any value.

    Returns:
        The first matching ``TypeTag``, or ``TypeTag.UNKNOWN`` for values
        outside every category (dicts, sets, plain objects, ...).
    """
    for matches, tag in _CLASSIFIERS:
        if matches(x):
            return tag
    return TypeTag.UNKNOWN


def is_type(type_name: str | TypeTag, x: tp.Any) -> bool:
    """Check whether ``x`` belongs to the category ``type_name``.

    ``"number"`` is treated as the broad numeric category and also matches
    ``integer`` and ``float`` values. Unknown names simply never match.

    Args:
        type_name: Category name such as ``"list"``, or a ``TypeTag``.
        x: Value to test.

    Returns:
        True if ``get_type(x)`` is ``type_name`` (or numeric, for ``"number"``).

    Raises:
        InvalidArgument: If ``type_name`` is empty or not a string.
    """
    if isinstance(type_name, TypeTag):
        type_name = type_name.value
    type_name = require_type_name(type_name)

    tag = get_type(x)
    if type_name == TypeTag.NUMBER.value:
        return tag.is_numeric
    return tag.value == type_name
