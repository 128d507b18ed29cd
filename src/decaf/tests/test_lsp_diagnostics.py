"""Tests for LSP diagnostic conversion."""

from lsprotocol import types as lsp

from devex.lsp.diagnostics import compute_diagnostics, to_lsp_diagnostics
from devex.lsp.symbols import get_document_symbols
from decaf.analyzer import Diagnostic
from decaf.tests.builders import BOOL, INT, VOID, func, main_func, program, var

URI = "file:///tmp/example.decaf"


class TestComputeDiagnostics:
    def test_clean_program(self):
        result = compute_diagnostics(URI, program(main_func()))
        assert result.diagnostics == []
        assert result.analyzed.errors == []

    def test_lines_are_zero_based(self):
        result = compute_diagnostics(URI, program(var("v", VOID, line=3)))
        void, no_main = result.diagnostics
        assert void.range.start.line == 2
        assert void.message == "Void variable 'v' on line 3"
        assert no_main.range.start.line == 0
        assert no_main.severity == lsp.DiagnosticSeverity.Error
        assert no_main.source == "decaf"

    def test_null_tree(self):
        result = compute_diagnostics(URI, None)
        assert [d.message for d in result.diagnostics] == ["Null tree"]

    def test_publish_params(self):
        params = compute_diagnostics(URI, program(main_func())).publish_params()
        assert params.uri == URI
        assert params.diagnostics == []


class TestToLspDiagnostics:
    def test_custom_source(self):
        (diag,) = to_lsp_diagnostics([Diagnostic("Invalid break on line 7", 7)], source="p3")
        assert diag.source == "p3"
        assert diag.range.start.line == 6
        assert diag.range.end.line == 7


class TestDocumentSymbols:
    def test_outline(self):
        tree = program(
            var("a", INT, 4, line=1),
            func("add", INT, [("x", INT), ("y", BOOL)], line=2),
            main_func(variables=[var("n", line=6)], line=5),
        )
        array, add, main = get_document_symbols(tree)
        assert array.kind == lsp.SymbolKind.Array
        assert array.detail == "int a[4]"
        assert add.detail == "int add(int x, bool y)"
        assert add.range.start.line == 1
        assert [c.name for c in main.children] == ["n"]
        assert main.children[0].kind == lsp.SymbolKind.Variable

    def test_no_program(self):
        assert get_document_symbols(None) == []
