"""Monkey lexer: converts source text into a stream of positioned tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from monkey.errors import LexError
from monkey.tokens import (
    SINGLE_CHAR_KINDS,
    Span,
    Token,
    TokenKind,
    is_digit,
    is_ident_char,
    lookup_keyword,
)


class Lexer:
    """Produce Monkey tokens lazily, one per call to :meth:`next_token`.

    The stream ends with an EOF token, and keeps returning EOF if polled
    again. Unrecognized characters become UNKNOWN tokens and are recorded
    in :attr:`errors`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self.errors: list[LexError] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def lineno(self) -> int:
        return self._line

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return

    def next_token(self) -> Token:
        """Return the next token from the source."""
        self._skip_whitespace()

        if self._at_end():
            return Token(TokenKind.EOF, "", Span(self._line, 0))

        start = self._current_span()
        ch = self._advance()

        if is_ident_char(ch):
            word = ch + self._advance_while(is_ident_char)
            return Token(lookup_keyword(word), word, start)

        if ch == "=":
            if self._advance_if(lambda c: c == "="):
                return Token(TokenKind.EQ, "==", start)
            return Token(TokenKind.ASSIGN, "=", start)

        if ch == "!":
            if self._advance_if(lambda c: c == "="):
                return Token(TokenKind.NOT_EQ, "!=", start)
            return Token(TokenKind.NOT, "!", start)

        if is_digit(ch):
            digits = ch + self._advance_while(is_digit)
            return Token(TokenKind.INT, digits, start)

        kind = SINGLE_CHAR_KINDS.get(ch)
        if kind is not None:
            return Token(kind, ch, start)

        self.errors.append(LexError(f"unrecognized character {ch!r}", start, self._source))
        return Token(TokenKind.UNKNOWN, ch, start)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current_span(self) -> Span:
        return Span(self._line, self._col)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _advance_if(self, predicate: Callable[[str], bool]) -> str | None:
        """Consume and return the next character only if it satisfies *predicate*."""
        if self._at_end() or not predicate(self._peek()):
            return None
        return self._advance()

    def _advance_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while not self._at_end() and predicate(self._peek()):
            chars.append(self._advance())
        return "".join(chars)

    def _skip_whitespace(self) -> None:
        # _advance bumps the line number on each newline
        self._advance_while(str.isspace)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return list(Lexer(source))
