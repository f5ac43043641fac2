"""Minimal LSP server for jsxtree markup files, diagnostics only."""

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

from jsxtree import __version__
from jsxtree.cache import TranslationCache
from jsxtree.errors import MarkdownConversionFailure, ParseFailure, TranslationError
from jsxtree.result import Err, attempt

MARKDOWN_SUFFIXES = (".md", ".markdown")

server = LanguageServer("jsxtree-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _range(exc: TranslationError, source: str, markdown: bool) -> Range:
    """Map an error position (1-based, trimmed source) to an LSP range."""
    if markdown or exc.position is None:
        return Range(start=Position(line=0, character=0), end=Position(line=0, character=0))

    # Positions are relative to the trimmed source; shift back over the lead
    lead = source[: len(source) - len(source.lstrip())]
    line = exc.position.line - 1 + lead.count("\n")
    col = exc.position.column - 1
    if exc.position.line == 1:
        col += len(lead) - (lead.rfind("\n") + 1)
    return Range(
        start=Position(line=line, character=col),
        end=Position(line=line, character=col + 1),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Translate the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    markdown = uri.lower().endswith(MARKDOWN_SUFFIXES)
    diagnostics: list[Diagnostic] = []

    # Fresh cache per validation
    cache = TranslationCache()
    outcome = attempt(cache.markdown if markdown else cache.get_or_translate, source)

    if isinstance(outcome, Err):
        exc = outcome.error
        if isinstance(exc, (ParseFailure, MarkdownConversionFailure)):
            severity = DiagnosticSeverity.Error
        else:
            severity = DiagnosticSeverity.Warning
        diagnostics.append(
            Diagnostic(
                range=_range(exc, source, markdown),
                message=exc.message,
                severity=severity,
                source="jsxtree",
            )
        )

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
