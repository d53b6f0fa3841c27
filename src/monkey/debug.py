"""--debug AST dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from monkey.ast import ExprData, ExprStatement, Program, ReturnStatement, VarStatement
from monkey.tokens import Token


def dump_program(program: Program, *, file: TextIO | None = None) -> None:
    """Print a human-readable AST tree to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    file.write("Program\n")
    for stmt in program.statements:
        if isinstance(stmt, VarStatement):
            file.write(f"{_indent(1)}Var {_token(stmt.token)}\n")
            file.write(f"{_indent(2)}Name {_token(stmt.name)}\n")
            _dump_expr(stmt.expr, 2, file)
        elif isinstance(stmt, ReturnStatement):
            file.write(f"{_indent(1)}Return {_token(stmt.token)}\n")
            _dump_expr(stmt.expr, 2, file)
        elif isinstance(stmt, ExprStatement):
            file.write(f"{_indent(1)}Expr {_token(stmt.token)}\n")
            _dump_expr(stmt.expr, 2, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _token(tok: Token) -> str:
    return f"{tok.value!r} @{tok.span.line}:{tok.span.column}"


def _dump_expr(expr: ExprData, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{expr.kind.name}({expr.text!r})\n")
