"""Token kinds, data structures, keyword table, and character classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(Enum):
    """Lexical categories. Each value is the literal used in diagnostics."""

    EOF = "Eof"
    UNKNOWN = "Unknown"  # unrecognized character

    # Identifiers and literals
    IDENT = "Ident"  # add, foobar, x, y
    INT = "Int"  # 123456

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    NOT = "!"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQ = "=="
    NOT_EQ = "!="
    LT = "<"
    GT = ">"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    LET = "let"
    FUNCTION = "fn"
    IF = "if"
    ELSE = "else"
    RETURN = "return"
    TRUE = "true"
    FALSE = "false"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Span:
    """Source position: 1-based line, 1-based column (0 for end of input)."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token. Equality ignores the span."""

    kind: TokenKind
    value: str
    span: Span = field(compare=False)


KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
    "fn": TokenKind.FUNCTION,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


def lookup_keyword(word: str) -> TokenKind:
    """Return the keyword kind for *word*, or IDENT if it is not reserved."""
    return KEYWORDS.get(word, TokenKind.IDENT)


def is_ident_char(ch: str) -> bool:
    """Return True if ch may appear in an identifier (letters and '_')."""
    return ch.isalpha() or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"
