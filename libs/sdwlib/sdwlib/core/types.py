"""sdw primitive type definitions."""

from __future__ import annotations

from enum import Enum


class PrimitiveType(Enum):
    """Built-in value types, resolvable without a symbol table."""

    VOID = "void"
    INT = "int"

    @classmethod
    def default(cls) -> PrimitiveType:
        return cls.VOID

    @classmethod
    def from_name(cls, name: str) -> PrimitiveType | None:
        """Look up a primitive type by its source-level spelling."""
        for member in cls:
            if member.value == name:
                return member
        return None

    def __str__(self) -> str:
        return self.value
