"""Document symbol provider for Decaf.

Walks the AST to produce a DocumentSymbol hierarchy for the Outline view.
"""

from __future__ import annotations

from lsprotocol import types as lsp

from decaf.ast_nodes import FuncDecl, Program, VarDecl


def _line_range(line: int) -> lsp.Range:
    """Whole-line range for a 1-based Decaf line."""
    line_0 = max(0, line - 1)
    return lsp.Range(
        start=lsp.Position(line=line_0, character=0),
        end=lsp.Position(line=line_0 + 1, character=0),
    )


def _var_detail(decl: VarDecl) -> str:
    if decl.is_array:
        return f"{decl.type} {decl.name}[{decl.array_length}]"
    return f"{decl.type} {decl.name}"


def _func_detail(decl: FuncDecl) -> str:
    """Build a detail string like 'int add(int a, int b)'."""
    params = ", ".join(f"{p.type} {p.name}" for p in decl.parameters)
    return f"{decl.return_type} {decl.name}({params})"


def _var_symbol(decl: VarDecl) -> lsp.DocumentSymbol:
    return lsp.DocumentSymbol(
        name=decl.name,
        kind=lsp.SymbolKind.Array if decl.is_array else lsp.SymbolKind.Variable,
        range=_line_range(decl.line),
        selection_range=_line_range(decl.line),
        detail=_var_detail(decl),
    )


def get_document_symbols(program: Program | None) -> list[lsp.DocumentSymbol]:
    """Extract global variables and functions, with function locals as children."""
    if program is None:
        return []
    symbols = [_var_symbol(v) for v in program.variables]
    for func in program.functions:
        children = [_var_symbol(v) for v in func.body.variables] if func.body else []
        symbols.append(lsp.DocumentSymbol(
            name=func.name,
            kind=lsp.SymbolKind.Function,
            range=_line_range(func.line),
            selection_range=_line_range(func.line),
            detail=_func_detail(func),
            children=children,
        ))
    return symbols
