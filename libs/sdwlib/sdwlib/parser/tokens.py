"""Lexeme definitions for the sdw lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from sdwlib.diagnostics.location import PositionInfo


class LexemeKind(Enum):
    """All lexeme kinds recognized by the sdw lexer."""

    # === Keywords ===
    FN = auto()
    RETURN = auto()

    # Literals
    INT_LIT = auto()
    IDENT = auto()

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,

    # Special
    NEWLINE = auto()

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS


# Keyword string -> LexemeKind mapping.
# Alphabetic runs are checked against this table before becoming identifiers.
KEYWORDS: dict[str, LexemeKind] = {
    "fn": LexemeKind.FN,
    "return": LexemeKind.RETURN,
}

_KEYWORD_KINDS = frozenset(KEYWORDS.values())

# Single-character lexemes that need no lookahead.
PUNCTUATION: dict[str, LexemeKind] = {
    "(": LexemeKind.LPAREN,
    ")": LexemeKind.RPAREN,
    "{": LexemeKind.LBRACE,
    "}": LexemeKind.RBRACE,
    ";": LexemeKind.SEMICOLON,
    ",": LexemeKind.COMMA,
}

# ASCII whitespace as understood by the lexer.  Only "\n" is significant.
WHITESPACE = frozenset(" \t\n\r\f")

INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Lexeme:
    """A single classified token plus its source position.

    ``value`` holds the integer for ``INT_LIT``, the name for ``IDENT`` and
    ``None`` for every other kind.
    """

    kind: LexemeKind
    lexeme: str
    pos: PositionInfo
    value: int | str | None = None

    def describe(self) -> str:
        """Short human-readable form used in parse diagnostics."""
        if self.kind == LexemeKind.NEWLINE:
            return "NEWLINE"
        return f"{self.kind.name} {self.lexeme!r}"
