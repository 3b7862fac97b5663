"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from arithlex.lexer import Scanner, tokenize
from arithlex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str, strict: bool = False) -> list[Token]:
        tokens = tokenize(source, strict=strict)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def scanner():
    """Return a helper that builds a Scanner over source."""

    def _scanner(source: str, strict: bool = False) -> Scanner:
        return Scanner(source, strict=strict)

    return _scanner


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
