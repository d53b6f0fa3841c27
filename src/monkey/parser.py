"""Monkey parser: converts a token stream into an AST.

Recursive descent with one token of lookahead. Syntax errors are collected
on :attr:`Parser.errors` rather than raised; after an error the parser skips
ahead to the next semicolon and carries on with the following statement.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum, auto
from typing import Protocol

from monkey.ast import ExprData, ExprKind, Program, ReturnStatement, Statement, VarStatement
from monkey.errors import LexError, ParseError
from monkey.lexer import Lexer
from monkey.tokens import Token, TokenKind

PrefixParseFn = Callable[[], ExprData]
InfixParseFn = Callable[[ExprData], ExprData]


class Precedence(IntEnum):
    LOWEST = auto()
    EQUALS = auto()  # ==
    LESSGREATER = auto()  # > or <
    SUM = auto()  # +
    PRODUCT = auto()  # *
    PREFIX = auto()  # -x or !x
    CALL = auto()  # f(x)


PRECEDENCES: dict[TokenKind, Precedence] = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESSGREATER,
    TokenKind.GT: Precedence.LESSGREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.MULTIPLY: Precedence.PRODUCT,
    TokenKind.DIVIDE: Precedence.PRODUCT,
    TokenKind.LPAREN: Precedence.CALL,
}


class PrattParser(Protocol):
    """Expression handler for one token kind, in prefix and infix position."""

    def prefix_parse(self) -> ExprData: ...

    def infix_parse(self, left: ExprData) -> ExprData: ...


class Parser:
    """Recursive descent parser for Monkey token streams."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors: list[ParseError] = []
        self._prefix_fns: dict[TokenKind, PrefixParseFn] = {}
        self._infix_fns: dict[TokenKind, InfixParseFn] = {}
        self._current = lexer.next_token()
        self._lookahead = lexer.next_token()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def current(self) -> Token:
        return self._current

    @property
    def lookahead(self) -> Token:
        return self._lookahead

    def advance(self) -> None:
        """Shift the lookahead token into current and pull a new lookahead."""
        self._current = self._lookahead
        self._lookahead = self.lexer.next_token()

    def _expect_current(self, kind: TokenKind) -> bool:
        """Check the current token without consuming it; record an error on mismatch."""
        if self._current.kind == kind:
            return True
        self._error(kind, self._current)
        return False

    def _expect_lookahead(self, kind: TokenKind) -> bool:
        """Advance onto the lookahead token if it has *kind*; record an error if not."""
        if self._lookahead.kind == kind:
            self.advance()
            return True
        self._error(kind, self._lookahead)
        return False

    def _skip_to_semicolon(self) -> None:
        while self._current.kind not in (TokenKind.SEMICOLON, TokenKind.EOF):
            self.advance()

    def _error(self, expected: TokenKind, found: Token) -> None:
        self.errors.append(
            ParseError(expected, found.kind, found.span, self.lexer.source, found.value)
        )

    # ------------------------------------------------------------------
    # Program level
    # ------------------------------------------------------------------

    def parse(self) -> Program:
        statements: list[Statement] = []

        while self._current.kind != TokenKind.EOF:
            stmt = self._parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()

        return Program(tuple(statements))

    def _parse_statement(self) -> Statement | None:
        kind = self._current.kind
        if kind == TokenKind.LET:
            return self._parse_var_decl()
        if kind == TokenKind.RETURN:
            return self._parse_return_statement()
        # Expression statements are not parsed yet; the token is skipped
        return None

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_var_decl(self) -> VarStatement | None:
        token = self._current

        if not self._expect_lookahead(TokenKind.IDENT):
            self._skip_to_semicolon()
            return None
        name = self._current

        if self._expect_lookahead(TokenKind.ASSIGN):
            self.advance()  # onto the first token of the value
            expr = self.parse_expression(Precedence.LOWEST, ExprKind.VARIABLE_DECL)
        else:
            expr = ExprData(ExprKind.VARIABLE_DECL)

        self._skip_to_semicolon()
        self._expect_current(TokenKind.SEMICOLON)
        return VarStatement(token, name, expr)

    def _parse_return_statement(self) -> ReturnStatement:
        token = self._current
        self.advance()

        expr = self.parse_expression(Precedence.LOWEST, ExprKind.RETURN)

        self._skip_to_semicolon()
        self._expect_current(TokenKind.SEMICOLON)
        return ReturnStatement(token, expr)

    # ------------------------------------------------------------------
    # Expressions (extension point)
    # ------------------------------------------------------------------

    def register_prefix(self, kind: TokenKind, fn: PrefixParseFn) -> None:
        self._prefix_fns[kind] = fn

    def register_infix(self, kind: TokenKind, fn: InfixParseFn) -> None:
        self._infix_fns[kind] = fn

    def register(self, kind: TokenKind, handler: PrattParser) -> None:
        """Register both halves of a PrattParser handler for *kind*."""
        self.register_prefix(kind, handler.prefix_parse)
        self.register_infix(kind, handler.infix_parse)

    def lookahead_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._lookahead.kind, Precedence.LOWEST)

    def current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._current.kind, Precedence.LOWEST)

    def parse_expression(
        self,
        precedence: Precedence = Precedence.LOWEST,
        kind: ExprKind = ExprKind.EXPRESSION,
    ) -> ExprData:
        """Parse an expression starting at the current token.

        Without a prefix handler for the current token kind, returns an
        empty placeholder of *kind* and consumes nothing. Handlers run with
        the current token set to the one they are registered for.
        """
        prefix = self._prefix_fns.get(self._current.kind)
        if prefix is None:
            return ExprData(kind)
        left = prefix()

        while (
            self._lookahead.kind != TokenKind.SEMICOLON
            and precedence < self.lookahead_precedence()
        ):
            infix = self._infix_fns.get(self._lookahead.kind)
            if infix is None:
                return left
            self.advance()
            left = infix(left)

        return left


def parse(source: str) -> tuple[Program, list[LexError | ParseError]]:
    """Convenience function: parse source text.

    Returns the Program and every error collected, lexical errors first.
    """
    lexer = Lexer(source)
    parser = Parser(lexer)
    program = parser.parse()
    errors: list[LexError | ParseError] = [*lexer.errors, *parser.errors]
    return program, errors
