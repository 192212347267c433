"""AST node types for the sdw parser.

Expression nodes are defined in ``sdwlib.core.expressions`` and re-exported
here for convenience.  This module adds statement- and program-level nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sdwlib.core.expressions import ExprNode, IntLiteral
from sdwlib.core.types import PrimitiveType
from sdwlib.diagnostics.location import PositionInfo

__all__ = [
    # Expression nodes (re-exported from core)
    "ExprNode",
    "IntLiteral",
    # Declarations
    "ParameterNode",
    "BlockNode",
    "FunctionNode",
    # Statement nodes
    "ReturnNode",
    "StmtNode",
    # Compilation unit
    "RootNode",
]


@dataclass(frozen=True)
class ParameterNode:
    """``TYPE NAME`` inside a function's parameter list."""

    type: PrimitiveType
    name: str
    pos: PositionInfo | None = None


@dataclass(frozen=True)
class ReturnNode:
    """``return [expr]``; ``value`` is ``None`` for a bare return."""

    value: ExprNode | None = None
    pos: PositionInfo | None = None


@dataclass(frozen=True)
class BlockNode:
    """``{ stmt* }``."""

    statements: tuple[StmtNode, ...] = ()
    pos: PositionInfo | None = None


@dataclass(frozen=True)
class FunctionNode:
    """``fn RET_TYPE NAME(params) { body }``.  Valid wherever a statement is."""

    name: str
    return_type: PrimitiveType
    params: tuple[ParameterNode, ...]
    body: BlockNode
    pos: PositionInfo | None = None


StmtNode = Union[ReturnNode, FunctionNode]


@dataclass(frozen=True)
class RootNode:
    """Top-level compilation unit."""

    statements: tuple[StmtNode, ...] = ()
