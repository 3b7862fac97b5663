"""Arithmetic expression scanner: converts source text into tokens on demand."""

from __future__ import annotations

from collections.abc import Iterator

from arithlex.errors import LexError
from arithlex.tokens import (
    SINGLE_CHAR_TOKENS,
    WHITESPACE,
    Position,
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class Scanner:
    """Scan arithmetic source text one token at a time.

    Each call to next_token() skips whitespace and returns the next token.
    An unrecognised character ends the scan: a non-strict scanner returns an
    EOF token, a strict scanner raises LexError. Either way the scanner is
    exhausted from then on and keeps returning EOF.
    """

    def __init__(self, source: str, *, strict: bool = False) -> None:
        self._source = source
        self._strict = strict
        self._start = 0
        self._current = 0
        self._line = 1
        self._col = 1
        self._exhausted = False
        self._halted_at: Position | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def line(self) -> int:
        return self._line

    @property
    def exhausted(self) -> bool:
        """True once scanning has ended; later calls only return EOF."""
        return self._exhausted

    @property
    def halted_at(self) -> Position | None:
        """Position of the unrecognised character that stopped the scan, if any."""
        return self._halted_at

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        while True:
            tok = self.next_token()
            if tok.type == TokenType.EOF:
                return
            yield tok

    def next_token(self) -> Token:
        """Scan and return the next token."""
        if self._exhausted:
            return self._eof()

        self._skip_whitespace()

        if self._at_end():
            self._exhausted = True
            return self._eof()

        self._start = self._current
        start = self._current_pos()
        ch = self._advance()

        if is_ident_start(ch):
            while is_ident_char(self._peek()):
                self._advance()
            return self._make_token(TokenType.IDENTIFIER, start)

        if is_digit(ch):
            while is_digit(self._peek()):
                self._advance()
            return self._make_token(TokenType.NUMBER, start)

        tt = SINGLE_CHAR_TOKENS.get(ch)
        if tt is not None:
            return self._make_token(tt, start)

        # Unrecognised character: rewind onto it and stop for good
        self._current = self._start
        self._col = start.column
        self._exhausted = True
        self._halted_at = start
        if self._strict:
            raise LexError(f"unexpected character {ch!r}", start, self._source)
        return self._eof()

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._current)

    def _peek(self) -> str:
        if self._at_end():
            return ""
        return self._source[self._current]

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._peek() in WHITESPACE:
            self._advance()

    def _make_token(self, tt: TokenType, start: Position) -> Token:
        return Token(tt, self._source[self._start : self._current], start)

    def _eof(self) -> Token:
        return Token(TokenType.EOF, "", self._current_pos())


def tokenize(source: str, *, strict: bool = False) -> list[Token]:
    """Convenience function: scan source text and return all tokens, EOF included."""
    scanner = Scanner(source, strict=strict)
    tokens = list(scanner)
    tokens.append(scanner.next_token())
    return tokens
