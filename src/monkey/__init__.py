"""Monkey language lexer and parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkey.ast import Program
    from monkey.errors import LexError, ParseError

__version__ = "0.1.0"


def check(source: str) -> tuple[Program, list[LexError | ParseError]]:
    """Lex and parse Monkey source, returning the Program and all errors."""
    from monkey.parser import parse

    return parse(source)
