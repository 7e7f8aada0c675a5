"""
Prefix Calculator Language Server entry point.

This server provides basic language features for files of prefix
expressions (one per line) using `pygls`. It reuses the line runner so the
editor reports exactly what the calculator would: lexical, syntax and
evaluation errors become diagnostics, and hovering a line shows its value.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from prefixcalc.runner import LineResult, run_line, run_lines

# Editors break lines only on these; str.splitlines() also breaks on \x0c and \x85
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines the way editor clients number them."""
    return LINE_BREAK.split(text)


def analyze(text: str) -> Dict[int, LineResult]:
    """Run every non-blank line of ``text``, keyed by 0-based line number."""
    return {lineno - 1: result for lineno, result in run_lines(split_lines(text))}


def diagnostics_for(text: str) -> List[Diagnostic]:
    """Build one error diagnostic per failing line of ``text``."""
    diagnostics: List[Diagnostic] = []
    for line, result in analyze(text).items():
        if result.ok:
            continue
        start = (result.position or 1) - 1
        end = max(start + 1, len(result.source))
        diagnostics.append(
            Diagnostic(
                range=Range(Position(line, start), Position(line, end)),
                message=str(result.error),
                severity=DiagnosticSeverity.Error,
                source="prefixcalc",
                code=type(result.error).__name__,
            )
        )
    return diagnostics


def hover_text_for(line: str) -> Optional[str]:
    """Return the hover text for one source line, or ``None`` if blank."""
    if not line.strip():
        return None
    result = run_line(line)
    if not result.ok:
        return result.describe()
    if result.value is None:
        return "no value"
    return f"= {result.value}"


class PrefixCalcLanguageServer(LanguageServer):
    """Language server for prefix expression files."""

    def __init__(self) -> None:
        super().__init__("prefixcalc-ls", "v0.1")

    def validate(self, uri: str, text: str) -> None:
        """Publish diagnostics for ``text``."""
        self.publish_diagnostics(uri, diagnostics_for(text))


lang_server = PrefixCalcLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: PrefixCalcLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Validate a document when it is opened."""
    ls.validate(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: PrefixCalcLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-validate a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.validate(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: PrefixCalcLanguageServer, params: DidCloseTextDocumentParams) -> None:
    """Clear diagnostics for a closed document."""
    ls.publish_diagnostics(params.text_document.uri, [])


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: PrefixCalcLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Show the value of the line under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    if params.position.line >= len(doc.lines):
        return None
    text = hover_text_for(doc.lines[params.position.line])
    if text is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=text)
    return Hover(contents=contents)


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
