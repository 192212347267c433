"""Lexical and syntactic error payloads for the sdw front end."""

from __future__ import annotations

from dataclasses import dataclass

from sdwlib.diagnostics.errors import ErrorPayload
from sdwlib.diagnostics.stage import ErrorStage

# ---------------------------------------------------------------------------
# Lexical stage
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnrecognisedToken(ErrorPayload):
    """A run of characters that matches no lexeme classification rule."""

    stage = ErrorStage.LEXICAL

    raw: str

    def message(self) -> str:
        return f"an unrecognised token was encountered: {self.raw!r}"


@dataclass(frozen=True)
class IntegerOverflow(ErrorPayload):
    """A digit run that does not fit in a signed 64-bit integer."""

    stage = ErrorStage.LEXICAL

    raw: str

    def message(self) -> str:
        return f"integer literal {self.raw} does not fit in a signed 64-bit integer"


# ---------------------------------------------------------------------------
# Syntactic stage
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnexpectedEof(ErrorPayload):
    stage = ErrorStage.SYNTACTIC

    expected: str

    def message(self) -> str:
        return f"unexpected end of input, expected {self.expected}"


@dataclass(frozen=True)
class UnexpectedLexeme(ErrorPayload):
    """The front lexeme does not match what the grammar requires."""

    stage = ErrorStage.SYNTACTIC

    expected: str
    got: str

    def message(self) -> str:
        return f"expected {self.expected}, got {self.got}"


@dataclass(frozen=True)
class UnknownType(ErrorPayload):
    stage = ErrorStage.SYNTACTIC

    name: str

    def message(self) -> str:
        return f"custom types are not implemented yet (given {self.name!r})"


@dataclass(frozen=True)
class UnsupportedSyntax(ErrorPayload):
    """A statement or expression form the grammar does not implement yet."""

    stage = ErrorStage.SYNTACTIC

    description: str

    def message(self) -> str:
        return f"{self.description} is not supported yet"
