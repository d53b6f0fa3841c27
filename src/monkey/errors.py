"""Error types with formatted source context."""

from __future__ import annotations

from monkey.tokens import Span, TokenKind


def _format_context(message: str, span: Span, source: str, filename: str, width: int) -> str:
    lines = source.split("\n")
    line_idx = span.line - 1
    # End-of-input spans carry column 0; point at the first column instead
    col = max(1, span.column)

    # Only "\n" ends a line, matching Span.line
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    pad = " " * (col - 1)
    carets = "^" * max(1, width)

    line_num = str(span.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{span.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """An unrecognized character, recorded by the lexer without stopping it."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(message)

    def format(self, filename: str = "<stdin>") -> str:
        return _format_context(self.message, self.span, self.source, filename, 1)


class ParseError(Exception):
    """Syntax error: the parser expected one token kind and found another.

    The string form is the short diagnostic, e.g.
    ``unexpected: 'Ident' found: '='``; :meth:`format` adds source context.
    """

    def __init__(
        self,
        expected: TokenKind,
        found: TokenKind,
        span: Span,
        source: str,
        found_text: str = "",
    ) -> None:
        self.expected = expected
        self.found = found
        self.span = span
        self.source = source
        self.found_text = found_text
        self.message = f"unexpected: '{expected}' found: '{found}'"
        super().__init__(self.message)

    def format(self, filename: str = "<stdin>") -> str:
        return _format_context(
            self.message, self.span, self.source, filename, len(self.found_text)
        )
