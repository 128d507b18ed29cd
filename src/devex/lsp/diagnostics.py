"""Diagnostic computation for Decaf documents.

Runs static analysis on an already-parsed program and converts its
diagnostics into LSP Diagnostic objects.
"""

from dataclasses import dataclass, field
from typing import Optional

from lsprotocol import types as lsp

from decaf.analyzer import Analyzer, AnalyzedProgram, Diagnostic
from decaf.ast_nodes import Program


@dataclass
class DocumentDiagnostics:
    """Result of analyzing one document."""

    uri: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    analyzed: Optional[AnalyzedProgram] = None

    def publish_params(self) -> lsp.PublishDiagnosticsParams:
        return lsp.PublishDiagnosticsParams(uri=self.uri, diagnostics=self.diagnostics)


def _make_diagnostic(
    line: int,
    message: str,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
    source: str = "decaf",
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic spanning the whole source line.

    Decaf uses 1-based lines; LSP uses 0-based.
    """
    line_0 = max(0, line - 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=0),
            end=lsp.Position(line=line_0 + 1, character=0),
        ),
        message=message,
        severity=severity,
        source=source,
    )


def to_lsp_diagnostics(diagnostics: list[Diagnostic],
                       source: str = "decaf") -> list[lsp.Diagnostic]:
    # whole-program diagnostics such as a missing main carry no line
    return [_make_diagnostic(d.line or 1, d.message, source=source)
            for d in diagnostics]


def compute_diagnostics(uri: str, program: Optional[Program],
                        source: str = "decaf") -> DocumentDiagnostics:
    """Analyze ``program`` and return its diagnostics for ``uri``."""
    analyzed = Analyzer().analyze(program)
    return DocumentDiagnostics(
        uri=uri,
        diagnostics=to_lsp_diagnostics(analyzed.diagnostics, source),
        analyzed=analyzed,
    )
