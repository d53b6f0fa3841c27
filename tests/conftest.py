"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from monkey.ast import Program
from monkey.errors import ParseError
from monkey.lexer import Lexer, tokenize
from monkey.parser import Parser
from monkey.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns (Program, syntax errors)."""

    def _parse(source: str) -> tuple[Program, list[ParseError]]:
        parser = Parser(Lexer(source))
        program = parser.parse()
        return program, parser.errors

    return _parse


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_no_errors(errors: list) -> None:
    """Fail with every collected error message if the list is not empty."""
    assert not errors, "unexpected errors:\n" + "\n".join(str(e) for e in errors)
