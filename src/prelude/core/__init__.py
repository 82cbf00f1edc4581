"""Core types and configuration shared by the functional modules."""

from prelude.core.config import Settings, settings
from prelude.core.enums import TypeTag

__all__ = [
    "Settings",
    "settings",
    "TypeTag",
]
