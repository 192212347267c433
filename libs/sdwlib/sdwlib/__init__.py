"""sdw compiler front end: lexing, recursive-descent parsing and diagnostics."""

from sdwlib.core import ExprNode, IntLiteral, PrimitiveType
from sdwlib.diagnostics import (
    ErrorStage,
    InternalDiagnosticError,
    PositionInfo,
    ShadowError,
    render_diagnostic,
)
from sdwlib.parser import (
    BlockNode,
    FunctionNode,
    Lexeme,
    LexemeKind,
    ParameterNode,
    ReturnNode,
    RootNode,
    lex,
    parse,
    parse_source,
)

__version__ = "0.1.0"

__all__ = [
    "lex",
    "parse",
    "parse_source",
    "render_diagnostic",
    "ShadowError",
    "InternalDiagnosticError",
    "ErrorStage",
    "PositionInfo",
    "Lexeme",
    "LexemeKind",
    "PrimitiveType",
    "ExprNode",
    "IntLiteral",
    "RootNode",
    "FunctionNode",
    "ParameterNode",
    "BlockNode",
    "ReturnNode",
]
