"""Recursive-descent parser for sdw source code.

Handles:
- ``fn TYPE NAME(TYPE NAME, ...) { ... }``  function declarations, nestable
- ``return [expr]``                          terminated by a newline or ``;``
- Expressions: integer literals only

Parsing is fail-fast: the first grammar violation raises a syntactic
:class:`ShadowError` and nothing is recovered.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from sdwlib.core.expressions import ExprNode, IntLiteral
from sdwlib.core.types import PrimitiveType
from sdwlib.diagnostics.errors import ShadowError
from sdwlib.diagnostics.location import PositionInfo
from sdwlib.parser.ast_nodes import (
    BlockNode,
    FunctionNode,
    ParameterNode,
    ReturnNode,
    RootNode,
    StmtNode,
)
from sdwlib.parser.errors import (
    UnexpectedEof,
    UnexpectedLexeme,
    UnknownType,
    UnsupportedSyntax,
)
from sdwlib.parser.lexer import lex
from sdwlib.parser.tokens import Lexeme, LexemeKind

logger = logging.getLogger(__name__)

# Lexemes that end a ``return`` statement.
_TERMINATORS = (LexemeKind.NEWLINE, LexemeKind.SEMICOLON)


class Parser:
    """Recursive-descent parser for sdw programs.

    Lexemes are popped from the front of a deque.  Decisions look at the
    front lexeme only; there is no backtracking.
    """

    def __init__(self, lexemes: Iterable[Lexeme]) -> None:
        self._lexemes: deque[Lexeme] = deque(lexemes)
        self._last: Lexeme | None = None

    # ------------------------------------------------------------------
    # Lexeme stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Lexeme | None:
        """Return the front lexeme without consuming it, or None at EOF."""
        return self._lexemes[0] if self._lexemes else None

    def _check(self, kind: LexemeKind) -> bool:
        """Return True if the front lexeme is *kind*."""
        return bool(self._lexemes) and self._lexemes[0].kind == kind

    def _advance(self) -> Lexeme:
        self._last = self._lexemes.popleft()
        return self._last

    def _eof_pos(self) -> PositionInfo:
        """Position one past the last lexeme of the stream."""
        last = self._last
        if last is None:
            return PositionInfo(0, 0, 1)
        if last.kind == LexemeKind.NEWLINE:
            return PositionInfo(last.pos.line + 1, 0, 1)
        return PositionInfo(last.pos.line, last.pos.column + last.pos.length, 1)

    def _front(self, expected: str) -> Lexeme:
        """Return the front lexeme, failing at EOF."""
        tok = self._peek()
        if tok is None:
            raise ShadowError.from_pos(UnexpectedEof(expected), self._eof_pos())
        return tok

    def _expect_one_of(self, kinds: tuple[LexemeKind, ...], expected: str) -> Lexeme:
        """Consume a lexeme whose kind is in *kinds* or raise."""
        tok = self._front(expected)
        if tok.kind not in kinds:
            raise ShadowError.from_pos(UnexpectedLexeme(expected, tok.describe()), tok.pos)
        return self._advance()

    def _expect(self, kind: LexemeKind, expected: str) -> Lexeme:
        """Consume a lexeme of *kind* or raise."""
        return self._expect_one_of((kind,), expected)

    def _skip_newlines(self) -> None:
        """Skip NEWLINE lexemes separating statements."""
        while self._check(LexemeKind.NEWLINE):
            self._advance()

    # ------------------------------------------------------------------
    # Compilation unit
    # ------------------------------------------------------------------

    def parse_root(self) -> RootNode:
        """Parse statements until EOF or an unmatched ``}``."""
        stmts: list[StmtNode] = []
        while True:
            self._skip_newlines()
            tok = self._peek()
            if tok is None:
                break
            if tok.kind == LexemeKind.RBRACE:
                logger.debug(
                    "stopped at unmatched '}' (%s) with %d lexeme(s) unconsumed",
                    tok.pos,
                    len(self._lexemes),
                )
                break
            stmts.append(self.parse_statement())
        return RootNode(statements=tuple(stmts))

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def parse_statement(self) -> StmtNode:
        """Dispatch on the front lexeme: ``fn`` or ``return``."""
        tok = self._front("a statement")
        if tok.kind == LexemeKind.FN:
            return self.parse_function()
        if tok.kind == LexemeKind.RETURN:
            return self.parse_return()
        raise ShadowError.from_pos(
            UnsupportedSyntax(f"a statement starting with {tok.describe()}"),
            tok.pos,
        )

    def parse_return(self) -> ReturnNode:
        """Parse ``return [expr]`` up to and including its terminator."""
        ret_tok = self._expect(LexemeKind.RETURN, "'return'")
        value: ExprNode | None = None
        if self._front("an expression or end of statement").kind not in _TERMINATORS:
            value = self.parse_expression()
        self._expect_one_of(_TERMINATORS, "end of statement")
        return ReturnNode(value=value, pos=ret_tok.pos)

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def parse_function(self) -> FunctionNode:
        """Parse ``fn TYPE NAME(params) { body }``."""
        fn_tok = self._expect(LexemeKind.FN, "'fn'")
        return_type = self._parse_type("a return type")
        name_tok = self._expect(LexemeKind.IDENT, "a function name")
        self._expect(LexemeKind.LPAREN, "'(' after function name")

        params: list[ParameterNode] = []
        if not self._check(LexemeKind.RPAREN):
            while self._lexemes:
                params.append(self.parse_parameter())
                if not self._check(LexemeKind.COMMA):
                    break
                self._advance()

        self._expect(LexemeKind.RPAREN, "')' after parameters")
        body = self.parse_block()
        return FunctionNode(
            name=name_tok.lexeme,
            return_type=return_type,
            params=tuple(params),
            body=body,
            pos=fn_tok.pos,
        )

    def parse_parameter(self) -> ParameterNode:
        """Parse ``TYPE NAME``."""
        type_tok = self._front("a parameter type")
        param_type = self._parse_type("a parameter type")
        name_tok = self._expect(LexemeKind.IDENT, "a parameter name")
        return ParameterNode(type=param_type, name=name_tok.lexeme, pos=type_tok.pos)

    def parse_block(self) -> BlockNode:
        """Parse ``{ stmt* }``."""
        open_tok = self._expect(LexemeKind.LBRACE, "'{'")
        stmts: list[StmtNode] = []
        while True:
            self._skip_newlines()
            if not self._lexemes or self._check(LexemeKind.RBRACE):
                break
            stmts.append(self.parse_statement())
        self._expect(LexemeKind.RBRACE, "'}'")
        return BlockNode(statements=tuple(stmts), pos=open_tok.pos)

    def _parse_type(self, expected: str) -> PrimitiveType:
        """Consume an identifier and resolve it as a primitive type name."""
        tok = self._expect(LexemeKind.IDENT, expected)
        resolved = PrimitiveType.from_name(tok.lexeme)
        if resolved is None:
            raise ShadowError.from_pos(UnknownType(tok.lexeme), tok.pos)
        return resolved

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self) -> ExprNode:
        """Parse an expression. Only integer literals are implemented."""
        tok = self._front("an expression")
        if tok.kind == LexemeKind.INT_LIT:
            self._advance()
            return IntLiteral(value=tok.value, pos=tok.pos)
        raise ShadowError.from_pos(
            UnsupportedSyntax(f"the non-literal expression {tok.describe()}"),
            tok.pos,
        )


# ------------------------------------------------------------------
# Convenience functions
# ------------------------------------------------------------------


def parse(lexemes: Iterable[Lexeme]) -> RootNode:
    """Parse a lexeme sequence into a :class:`RootNode`.

    Raises:
        ShadowError: At the first grammar violation.
    """
    root = Parser(lexemes).parse_root()
    logger.debug("parsed %d top-level statement(s)", len(root.statements))
    return root


def parse_source(source: str) -> RootNode:
    """Lex and parse sdw source code in one call."""
    return parse(lex(source))
