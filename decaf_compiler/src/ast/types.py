"""Primitive types of the Decaf language."""

from enum import Enum


class DecafType(Enum):
    """Declared or inferred type of a Decaf expression, variable or function.

    ``VOID`` doubles as the sentinel for "type unknown, already diagnosed".
    """

    INT = "int"
    BOOL = "bool"
    VOID = "void"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "DecafType":
        """Map a type keyword (``int``, ``bool``, ``void``) to its type."""
        return cls(name.strip())
