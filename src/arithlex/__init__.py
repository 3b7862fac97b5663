"""Arithmetic expression scanner."""

from __future__ import annotations

from arithlex.errors import LexError
from arithlex.lexer import Scanner, tokenize
from arithlex.tokens import Position, Token, TokenType

__version__ = "0.1.0"

__all__ = ["LexError", "Position", "Scanner", "Token", "TokenType", "tokenize"]
