"""Test helpers: concise AST construction and symbol-table population.

``build_tables`` stands in for the symbol-table phase that runs before
static analysis: it attaches a table to every Program, FuncDecl and Block
and records declarations in order, duplicates included.
"""

from contextlib import contextmanager

from decaf.ast_nodes import (
    Assignment, BinaryOp, BinaryOpType, Block, Break, Conditional, Continue,
    DecafType, FuncCall, FuncDecl, Literal, Location, NodeKind, Parameter,
    Program, Return, UnaryOp, UnaryOpType, VarDecl, WhileLoop,
)
from decaf.symbols import Symbol, SymbolKind, SymbolTable
from decaf.visitor import NodeVisitor, Phase

INT = DecafType.INT
BOOL = DecafType.BOOL
VOID = DecafType.VOID
STR = DecafType.STR


def var(name, type_=INT, length=None, line=1):
    if length is None:
        return VarDecl(name=name, type=type_, line=line)
    return VarDecl(name=name, type=type_, is_array=True, array_length=length, line=line)


def func(name, return_type=VOID, params=(), body=None, line=1):
    return FuncDecl(
        name=name,
        return_type=return_type,
        parameters=[Parameter(name=n, type=t) for n, t in params],
        body=body if body is not None else block(),
        line=line,
    )


def main_func(*statements, variables=(), return_type=INT, line=1):
    return func("main", return_type, body=block(*statements, variables=variables), line=line)


def block(*statements, variables=(), line=1):
    return Block(variables=list(variables), statements=list(statements), line=line)


def loc(name, index=None, line=1):
    return Location(name=name, index=index, line=line)


def lit(value, line=1):
    if isinstance(value, bool):
        return Literal(type=BOOL, value=value, line=line)
    if isinstance(value, str):
        return Literal(type=STR, value=value, line=line)
    return Literal(type=INT, value=value, line=line)


def binop(op, left, right, line=1):
    return BinaryOp(operator=op, left=left, right=right, line=line)


def neg(child, line=1):
    return UnaryOp(operator=UnaryOpType.NEG, child=child, line=line)


def not_(child, line=1):
    return UnaryOp(operator=UnaryOpType.NOT, child=child, line=line)


def assign(target, value, line=1):
    if isinstance(target, str):
        target = loc(target, line=line)
    return Assignment(location=target, value=value, line=line)


def if_(condition, then, otherwise=None, line=1):
    return Conditional(condition=condition, if_block=then, else_block=otherwise, line=line)


def while_(condition, body, line=1):
    return WhileLoop(condition=condition, body=body, line=line)


def brk(line=1):
    return Break(line=line)


def cont(line=1):
    return Continue(line=line)


def ret(value=None, line=1):
    return Return(value=value, line=line)


def call(name, *arguments, line=1):
    return FuncCall(name=name, arguments=list(arguments), line=line)


def program(*decls):
    variables = [d for d in decls if isinstance(d, VarDecl)]
    functions = [d for d in decls if isinstance(d, FuncDecl)]
    return build_tables(Program(variables=variables, functions=functions))


def _var_symbol(decl):
    if decl.is_array:
        return Symbol(decl.name, decl.type, SymbolKind.ARRAY,
                      length=decl.array_length, line=decl.line)
    return Symbol(decl.name, decl.type, line=decl.line)


class _TableBuilder:
    def __init__(self):
        self.scope = None

    @contextmanager
    def enter(self, node):
        saved = self.scope
        if isinstance(node, (Program, FuncDecl, Block)):
            self.scope = node.symbol_table
        try:
            yield
        finally:
            self.scope = saved

    def program(self, node, state):
        table = SymbolTable()
        table.local_symbols.extend(_var_symbol(v) for v in node.variables)
        table.local_symbols.extend(
            Symbol(f.name, f.return_type, SymbolKind.FUNCTION,
                   parameters=list(f.parameters), line=f.line)
            for f in node.functions)
        node.symbol_table = table

    def funcdecl(self, node, state):
        node.symbol_table = SymbolTable(
            [Symbol(p.name, p.type, line=node.line) for p in node.parameters],
            parent=self.scope)

    def block(self, node, state):
        node.symbol_table = SymbolTable(
            [_var_symbol(v) for v in node.variables], parent=self.scope)


def build_tables(tree):
    builder = _TableBuilder()
    visitor = NodeVisitor()
    visitor.register(NodeKind.PROGRAM, Phase.PRE, builder.program)
    visitor.register(NodeKind.FUNCDECL, Phase.PRE, builder.funcdecl)
    visitor.register(NodeKind.BLOCK, Phase.PRE, builder.block)
    visitor.traverse(tree, builder)
    return tree


__all__ = [
    "BinaryOpType", "INT", "BOOL", "VOID", "STR",
    "var", "func", "main_func", "block", "loc", "lit", "binop", "neg",
    "not_", "assign", "if_", "while_", "brk", "cont", "ret", "call",
    "program", "build_tables",
]
