"""AST node types for parsed Monkey programs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from monkey.tokens import Token


class ExprKind(Enum):
    VARIABLE_DECL = auto()  # value of a let statement
    RETURN = auto()  # value of a return statement
    EXPRESSION = auto()  # bare expression statement


@dataclass(frozen=True, slots=True)
class ExprData:
    """Expression placeholder: a tag and the expression's text.

    Statement parsers attach an empty payload unless an expression handler
    is registered on the parser.
    """

    kind: ExprKind
    text: str = ""

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class VarStatement:
    """let <name> = <expr>;"""

    token: Token
    name: Token
    expr: ExprData

    def __str__(self) -> str:
        return f"{self.token.value} {self.name.value} = {self.expr};"


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    """return <expr>;"""

    token: Token
    expr: ExprData

    def __str__(self) -> str:
        return f"{self.token.value} {self.expr};"


@dataclass(frozen=True, slots=True)
class ExprStatement:
    """A bare expression; token is the expression's first token."""

    token: Token
    expr: ExprData

    def __str__(self) -> str:
        return str(self.expr)


Statement = VarStatement | ReturnStatement | ExprStatement


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: statements in source order."""

    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)
