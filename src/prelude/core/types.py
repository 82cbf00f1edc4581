"""Reusable argument types and validators for the functional modules.

Arguments are described as ``Annotated`` types and checked with pydantic
``TypeAdapter`` instances. Validation failures surface as ``InvalidArgument``
so that callers only ever deal with a single misuse exception.

Type Aliases:
    UnaryFn: Any callable taking one element.
    Count: A strict integer (``bool`` is rejected).
    TypeName: A non-empty type category name (strict ``str``, no bytes).
"""

import typing as tp
from collections.abc import Sequence

import annotated_types as at
from pydantic import Strict, TypeAdapter, ValidationError

from prelude.logger.logger import logger

__all__ = [
    "InvalidArgument",
    "UnaryFn",
    "Count",
    "TypeName",
    "require_callable",
    "require_count",
    "require_sequence",
    "require_non_empty",
    "require_type_name",
]

UnaryFn = tp.Callable[[tp.Any], tp.Any]

Count = tp.Annotated[int, Strict()]

TypeName = tp.Annotated[str, Strict(), at.MinLen(1)]

_unary_fn_adapter = TypeAdapter(UnaryFn)
_count_adapter = TypeAdapter(Count)
_type_name_adapter = TypeAdapter(TypeName)


class InvalidArgument(ValueError):
    """Raised when an operation is called with a malformed argument.

    Attributes:
        argument: Name of the offending parameter.
    """

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {message}")


def _validate(adapter: TypeAdapter, value: tp.Any, argument: str) -> tp.Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        logger.debug(f"Rejected '{argument}' ({type(value).__name__}): {message}")
        raise InvalidArgument(argument, message) from e


def require_callable(fn: tp.Any, argument: str = "fn") -> UnaryFn:
    """Validator to ensure ``fn`` can be called.

    Args:
        fn: The value to validate.
        argument: Parameter name used in the error.
    Returns:
        UnaryFn: ``fn`` unchanged.
    Raises:
        InvalidArgument: If ``fn`` is not callable.
    """
    return _validate(_unary_fn_adapter, fn, argument)


def require_count(n: tp.Any, argument: str = "n") -> int:
    return _validate(_count_adapter, n, argument)


def require_type_name(name: tp.Any, argument: str = "type_name") -> str:
    return _validate(_type_name_adapter, name, argument)


def require_sequence(seq: tp.Any, argument: str = "seq") -> Sequence:
    """Validator to ensure ``seq`` is an ordered, indexable sequence.

    The sequence is returned as-is (never copied or coerced) so that
    operations returning their input keep its identity.

    Raises:
        InvalidArgument: If ``seq`` is not a ``collections.abc.Sequence``.
    """
    if not isinstance(seq, Sequence):
        message = f"expected a sequence, got {type(seq).__name__}"
        logger.debug(f"Rejected '{argument}': {message}")
        raise InvalidArgument(argument, message)
    return seq


def require_non_empty(seq: tp.Any, argument: str = "seq") -> Sequence:
    seq = require_sequence(seq, argument)
    if not seq:
        logger.debug(f"Rejected '{argument}': empty sequence")
        raise InvalidArgument(argument, "sequence must contain at least one element")
    return seq
