"""Lexer (tokenizer) for sdw source code."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterator

from sdwlib.diagnostics.errors import ShadowError
from sdwlib.diagnostics.location import PositionInfo
from sdwlib.parser.errors import IntegerOverflow, UnrecognisedToken
from sdwlib.parser.tokens import (
    INT64_MAX,
    KEYWORDS,
    PUNCTUATION,
    WHITESPACE,
    Lexeme,
    LexemeKind,
)

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class Lexer:
    """Tokenize sdw source into a flat lexeme stream.

    The lexer makes a single left-to-right pass.  Line breaks are significant
    and become ``NEWLINE`` lexemes (collapsed, so blank lines produce at most
    one); all other whitespace is discarded.  The first character run that
    cannot be classified raises a lexical :class:`ShadowError` and ends the
    pass.

    Iterating a ``Lexer`` yields lexemes lazily; :meth:`tokenize` collects
    them.  A lexer can be consumed only once.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 0
        self._col = 0

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _span(self, line: int, col: int) -> PositionInfo:
        """Span from (line, col) to the cursor. Runs never cross a line break."""
        return PositionInfo(line, col, self._col - col)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_word(self, line: int, col: int) -> Lexeme:
        """Scan a run of ASCII letters as a keyword or identifier."""
        begin = self._pos
        self._advance()
        while self._peek() in _LETTERS:
            self._advance()
        text = self._source[begin : self._pos]
        kind = KEYWORDS.get(text)
        if kind is not None:
            return Lexeme(kind, text, self._span(line, col))
        return Lexeme(LexemeKind.IDENT, text, self._span(line, col), value=text)

    def _scan_integer(self, line: int, col: int) -> Lexeme:
        """Scan a run of ASCII digits as a signed 64-bit integer literal."""
        begin = self._pos
        while self._peek() in _DIGITS:
            self._advance()
        text = self._source[begin : self._pos]
        value = int(text)
        if value > INT64_MAX:
            raise ShadowError.from_pos(IntegerOverflow(text), self._span(line, col))
        return Lexeme(LexemeKind.INT_LIT, text, self._span(line, col), value=value)

    # ------------------------------------------------------------------
    # Main entry points
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Lexeme]:
        # Suppress leading newlines and collapse runs of blank lines.
        last_was_newline = True

        while not self._at_end():
            ch = self._peek()
            line, col = self._line, self._col

            # --- Alphabetic run: keyword / identifier ---
            if ch in _LETTERS:
                last_was_newline = False
                yield self._scan_word(line, col)
                continue

            # --- Digit run: integer literal ---
            if ch in _DIGITS:
                last_was_newline = False
                yield self._scan_integer(line, col)
                continue

            # --- Whitespace ---
            if ch in WHITESPACE:
                self._advance()
                if ch == "\n" and not last_was_newline:
                    last_was_newline = True
                    yield Lexeme(LexemeKind.NEWLINE, "\n", PositionInfo(line, col, 1))
                continue

            # --- Single-character lexemes ---
            self._advance()
            kind = PUNCTUATION.get(ch)
            if kind is None:
                raise ShadowError.from_pos(UnrecognisedToken(ch), self._span(line, col))
            last_was_newline = False
            yield Lexeme(kind, ch, self._span(line, col))

    def tokenize(self) -> list[Lexeme]:
        """Tokenize the entire source."""
        lexemes = list(self)
        logger.debug(
            "lexed %d lexeme(s) over %d line(s)", len(lexemes), self._line + 1
        )
        return lexemes


def lex(source: str) -> list[Lexeme]:
    """Tokenize sdw source code.

    Raises:
        ShadowError: At the first unrecognised or out-of-range token.
    """
    return Lexer(source).tokenize()
