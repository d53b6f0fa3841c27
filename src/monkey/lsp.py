"""Minimal LSP server for Monkey, diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from monkey.errors import LexError, ParseError
from monkey.parser import parse

server = LanguageServer("monkey-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(err: LexError | ParseError) -> Diagnostic:
    line = err.span.line - 1
    # Spans are 1-based; end-of-input spans use column 0
    col = max(err.span.column - 1, 0)
    width = 1 if isinstance(err, LexError) else max(1, len(err.found_text))
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + width),
        ),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="monkey",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex and parse the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    _, errors = parse(doc.source)
    diagnostics = [_to_diagnostic(err) for err in errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
