"""Interactive prompt: read a line, tokenize or parse it, print the result."""

from __future__ import annotations

from typing import TextIO

from monkey.lexer import Lexer
from monkey.parser import parse
from monkey.tokens import TokenKind

PROMPT = ">> "
MODES = ("tokens", "parse")


def start(reader: TextIO, writer: TextIO, prompt: str = PROMPT, mode: str = "tokens") -> None:
    """Run the prompt loop until *reader* is exhausted."""
    if mode not in MODES:
        raise ValueError(f"unknown REPL mode: {mode!r}")

    while True:
        writer.write(prompt)
        writer.flush()
        line = reader.readline()
        if not line:
            return

        if mode == "tokens":
            _print_tokens(line, writer)
        else:
            _print_program(line, writer)
        writer.flush()


def _print_tokens(line: str, writer: TextIO) -> None:
    lexer = Lexer(line)
    tok = lexer.next_token()
    while tok.kind != TokenKind.EOF:
        writer.write(f"{tok!r}\n")
        tok = lexer.next_token()


def _print_program(line: str, writer: TextIO) -> None:
    program, errors = parse(line)
    for stmt in program.statements:
        writer.write(f"{stmt}\n")
    for err in errors:
        writer.write(f"error: {err}\n")
