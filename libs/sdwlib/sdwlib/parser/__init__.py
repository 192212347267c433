"""sdw parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from sdwlib.parser.ast_nodes import (
    BlockNode,
    FunctionNode,
    ParameterNode,
    ReturnNode,
    RootNode,
    StmtNode,
)
from sdwlib.parser.errors import (
    IntegerOverflow,
    UnexpectedEof,
    UnexpectedLexeme,
    UnknownType,
    UnrecognisedToken,
    UnsupportedSyntax,
)
from sdwlib.parser.lexer import Lexer, lex
from sdwlib.parser.parser import Parser, parse, parse_source
from sdwlib.parser.tokens import Lexeme, LexemeKind

__all__ = [
    "LexemeKind",
    "Lexeme",
    "Lexer",
    "lex",
    "RootNode",
    "FunctionNode",
    "ParameterNode",
    "BlockNode",
    "ReturnNode",
    "StmtNode",
    "Parser",
    "parse",
    "parse_source",
    "UnrecognisedToken",
    "IntegerOverflow",
    "UnexpectedEof",
    "UnexpectedLexeme",
    "UnknownType",
    "UnsupportedSyntax",
]
