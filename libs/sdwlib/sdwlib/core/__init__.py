"""sdw core subpackage (Layer 1 — depends only on diagnostics)."""

from sdwlib.core.expressions import ExprNode, IntLiteral
from sdwlib.core.types import PrimitiveType

__all__ = [
    "PrimitiveType",
    "ExprNode",
    "IntLiteral",
]
