"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    EOF = auto()  # end of input, also returned after an unrecognised character

    # Content
    IDENTIFIER = auto()  # letter (letter | digit)*
    NUMBER = auto()  # digit+

    # Operators and punctuation (single-character)
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token and the source text it came from."""

    type: TokenType
    lexeme: str
    position: Position
    literal: Any = None

    @property
    def line(self) -> int:
        return self.position.line


SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

WHITESPACE = frozenset(" \r\t\n")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and ch in "0123456789"


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier."""
    return ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch.isalpha() or is_digit(ch)
