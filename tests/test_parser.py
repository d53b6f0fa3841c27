"""Tests for statement parsing on well-formed input."""

from __future__ import annotations

from monkey.ast import ExprData, ExprKind, Program, ReturnStatement, VarStatement
from monkey.lexer import Lexer
from monkey.parser import Parser, parse
from monkey.tokens import TokenKind

from .conftest import assert_no_errors


class TestVarDeclarations:
    def test_three_declarations(self, parse_source):
        program, errors = parse_source("let x = 5; let y = 10; let foobar = 999999;")
        assert_no_errors(errors)
        assert len(program.statements) == 3
        for stmt, name in zip(program.statements, ["x", "y", "foobar"]):
            assert isinstance(stmt, VarStatement)
            assert stmt.token.kind == TokenKind.LET
            assert stmt.token.value == "let"
            assert stmt.name.kind == TokenKind.IDENT
            assert stmt.name.value == name

    def test_multiline(self, parse_source):
        program, errors = parse_source("\nlet x = 5;\nlet y = 10;\nlet foobar = 999999;\n")
        assert_no_errors(errors)
        assert [s.name.value for s in program.statements] == ["x", "y", "foobar"]

    def test_placeholder_expression(self, parse_source):
        program, _ = parse_source("let x = 1 + 2 * f(3);")
        assert program.statements[0].expr == ExprData(ExprKind.VARIABLE_DECL, "")

    def test_name_span(self, parse_source):
        program, _ = parse_source("let x = 1;\n  let yy = 2;")
        second = program.statements[1]
        assert second.token.span.line == 2
        assert second.token.span.column == 3
        assert second.name.span.column == 7

    def test_function_value_skipped_to_first_semicolon(self, parse_source):
        program, errors = parse_source("let add = fn(x, y) { x + y; };")
        assert_no_errors(errors)
        assert len(program.statements) == 1
        assert program.statements[0].name.value == "add"

    def test_empty_value(self, parse_source):
        program, errors = parse_source("let x = ;")
        assert_no_errors(errors)
        assert len(program.statements) == 1


class TestReturnStatements:
    def test_three_returns(self, parse_source):
        program, errors = parse_source("return 5; return add(3, 1); return 999999;")
        assert_no_errors(errors)
        assert len(program.statements) == 3
        for stmt in program.statements:
            assert isinstance(stmt, ReturnStatement)
            assert stmt.token.kind == TokenKind.RETURN
            assert stmt.expr == ExprData(ExprKind.RETURN, "")

    def test_bare_return(self, parse_source):
        program, errors = parse_source("return;")
        assert_no_errors(errors)
        assert len(program.statements) == 1


class TestProgram:
    def test_empty_program(self, parse_source):
        program, errors = parse_source("")
        assert program == Program(())
        assert program.statements == ()
        assert errors == []

    def test_mixed_statements_in_order(self, parse_source):
        program, errors = parse_source("let a = 1; return a; let b = 2;")
        assert_no_errors(errors)
        assert [type(s) for s in program.statements] == [
            VarStatement,
            ReturnStatement,
            VarStatement,
        ]

    def test_expression_statements_skipped(self, parse_source):
        program, errors = parse_source("x + y; let a = 1; 10 == 10; return a;")
        assert_no_errors(errors)
        assert len(program.statements) == 2

    def test_nested_return_inside_if_counts(self, parse_source):
        program, errors = parse_source("if (5 < 10) { return true; } else { return false; }")
        assert_no_errors(errors)
        assert len(program.statements) == 2

    def test_unknown_tokens_skipped(self, parse_source):
        program, errors = parse_source("@ let x = 1;")
        assert_no_errors(errors)
        assert len(program.statements) == 1


class TestParserState:
    def test_primes_two_tokens(self):
        parser = Parser(Lexer("let x = 5;"))
        assert parser.current.kind == TokenKind.LET
        assert parser.lookahead.kind == TokenKind.IDENT

    def test_advance_shifts_lookahead(self):
        parser = Parser(Lexer("let x"))
        parser.advance()
        assert parser.current.value == "x"
        assert parser.lookahead.kind == TokenKind.EOF
        parser.advance()
        assert parser.current.kind == TokenKind.EOF

    def test_parse_drains_lexer(self):
        lexer = Lexer("let x = 1; foo bar;")
        Parser(lexer).parse()
        assert lexer.next_token().kind == TokenKind.EOF


class TestParseFunction:
    def test_returns_program_and_errors(self):
        program, errors = parse("let x = 5;")
        assert len(program.statements) == 1
        assert errors == []

    def test_lex_errors_come_first(self):
        _, errors = parse("let = @;")
        assert [type(e).__name__ for e in errors] == ["LexError", "ParseError"]

    def test_package_check(self):
        import monkey

        program, errors = monkey.check("return 1;")
        assert len(program.statements) == 1
        assert errors == []
