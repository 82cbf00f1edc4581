"""Enumerations for runtime type categories."""

from enum import Enum


class TypeTag(str, Enum):
    """Category of a runtime value as reported by ``get_type``.

    Members compare equal to their string value, so ``TypeTag.LIST == "list"``.
    """

    ATOM = "atom"
    BOOLEAN = "boolean"
    BITSTRING = "bitstring"
    BINARY = "binary"
    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"
    LIST = "list"
    TUPLE = "tuple"
    PID = "pid"
    PORT = "port"
    REFERENCE = "reference"
    FUNCTION = "function"
    UNKNOWN = "unknown"

    @property
    def is_numeric(self) -> bool:
        """Whether the tag belongs to the broad ``number`` category."""
        return self in (TypeTag.INTEGER, TypeTag.FLOAT, TypeTag.NUMBER)

    @classmethod
    def from_name(cls, name: str) -> "TypeTag | None":
        """Look up a tag by its string value.

        Args:
            name: Tag name such as ``"list"`` or ``"float"``.

        Returns:
            The matching tag, or None if the name is not a known category.
        """
        try:
            return cls(name)
        except ValueError:
            return None
