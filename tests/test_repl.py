"""Tests for the interactive prompt loop."""

from __future__ import annotations

import io

import pytest

from monkey.repl import PROMPT, start
from monkey.tokens import Span, Token, TokenKind


def _run(text: str, **kwargs) -> str:
    out = io.StringIO()
    start(io.StringIO(text), out, **kwargs)
    return out.getvalue()


class TestTokensMode:
    def test_prints_each_token(self):
        output = _run("let x = 5;\n")
        lines = output.split("\n")
        assert lines[0].startswith(PROMPT)
        assert repr(Token(TokenKind.LET, "let", Span(1, 1))) in lines[0]
        assert repr(Token(TokenKind.SEMICOLON, ";", Span(1, 10))) in output
        assert "EOF" not in output

    def test_prompt_per_line_and_exit_on_end_of_input(self):
        output = _run("a\nb\n")
        assert output.count(PROMPT) == 3
        assert output.endswith(PROMPT)

    def test_empty_input(self):
        assert _run("") == PROMPT

    def test_custom_prompt(self):
        assert _run("", prompt="monkey> ") == "monkey> "

    def test_unknown_character_shown(self):
        output = _run("@\n")
        assert "UNKNOWN" in output


class TestParseMode:
    def test_prints_statements(self):
        output = _run("let x = 5; return x;\n", mode="parse")
        assert "let x = ;\n" in output
        assert "return ;\n" in output

    def test_prints_errors(self):
        output = _run("let = 5;\n", mode="parse")
        assert "error: unexpected: 'Ident' found: '='" in output

    def test_lex_errors(self):
        output = _run("let x = @;\n", mode="parse")
        assert "error: unrecognized character '@'" in output


class TestBadMode:
    def test_rejected(self):
        with pytest.raises(ValueError, match="unknown REPL mode"):
            _run("", mode="eval")
