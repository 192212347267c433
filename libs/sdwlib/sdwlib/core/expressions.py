"""Expression AST nodes and constant folding for sdw."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sdwlib.core.types import PrimitiveType
from sdwlib.diagnostics.location import PositionInfo


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses."""

    @abstractmethod
    def evaluated_type(self) -> PrimitiveType:
        """Return the primitive type this expression produces."""

    @abstractmethod
    def evaluate(self) -> int:
        """Constant-fold the expression. No environment is consulted."""


@dataclass(frozen=True)
class IntLiteral(ExprNode):
    """Signed 64-bit integer literal: 0, 42, 9223372036854775807."""

    value: int
    pos: PositionInfo | None = None

    def evaluated_type(self) -> PrimitiveType:
        return PrimitiveType.INT

    def evaluate(self) -> int:
        return self.value
