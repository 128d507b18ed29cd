"""Analyzer core: diagnostics, analysis context, and orchestration."""

from __future__ import annotations
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..ast_nodes import (
    Block, DecafType, FuncDecl, Node, NodeKind, Program, WhileLoop,
)
from ..symbols import Symbol, SymbolTable
from ..visitor import NodeVisitor, Phase

logger = logging.getLogger(__name__)


class AnalyzerError(Exception):
    """Internal invariant violation; never raised for defects in the program."""

    def __init__(self, message: str, line: int = 0):
        self.line = line
        super().__init__(f"{message} at {line}")


@dataclass(frozen=True)
class Diagnostic:
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class DiagnosticList:
    """Append-only, ordered; duplicate-looking messages are kept."""

    def __init__(self):
        self._items: list[Diagnostic] = []

    def append(self, message: str, line: Optional[int] = None):
        self._items.append(Diagnostic(message, line))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def messages(self) -> list[str]:
        return [d.message for d in self._items]


class AnalysisContext:
    """Mutable state threaded through one traversal."""

    def __init__(self):
        self.diagnostics = DiagnosticList()
        self.scope: SymbolTable | None = None
        self.global_scope: SymbolTable | None = None
        self.current_function: str | None = None
        self.loop_depth: int = 0
        self.node_types: dict[int, DecafType] = {}
        # id(scope) -> names whose first declaration has been visited
        self.declared: dict[int, set[str]] = {}

    def error(self, message: str, line: Optional[int] = None):
        self.diagnostics.append(message, line)

    def lookup(self, name: str) -> Symbol | None:
        if self.scope is None:
            return None
        return self.scope.lookup(name)

    def lookup_function(self, name: str | None) -> Symbol | None:
        if name is None:
            return None
        table = self.global_scope or self.scope
        if table is None:
            return None
        symbol = table.lookup(name)
        if symbol is None or not symbol.is_function:
            return None
        return symbol

    @contextmanager
    def enter(self, node: Node):
        """Scope/function/loop state for the duration of a subtree visit."""
        saved = (self.scope, self.current_function, self.loop_depth)
        if isinstance(node, (Program, FuncDecl, Block)):
            if node.symbol_table is None:
                logger.warning("%s on line %d has no symbol table; "
                               "keeping the enclosing scope",
                               type(node).__name__, node.line)
            else:
                self.scope = node.symbol_table
        if isinstance(node, FuncDecl):
            self.current_function = node.name
        elif isinstance(node, WhileLoop):
            self.loop_depth += 1
        try:
            yield
        finally:
            self.scope, self.current_function, self.loop_depth = saved


@dataclass
class AnalyzedProgram:
    program: Optional[Node]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    node_types: dict[int, DecafType] = field(default_factory=dict)

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics]


class AnalyzerBase:
    def __init__(self, require_main: bool = True):
        self.require_main = require_main

    def analyze(self, tree: Optional[Node]) -> AnalyzedProgram:
        ctx = AnalysisContext()
        if tree is None:
            ctx.error("Null tree")
            return AnalyzedProgram(program=None, diagnostics=list(ctx.diagnostics))
        if isinstance(tree, Program):
            ctx.global_scope = tree.symbol_table
        logger.debug("analyzing %s from line %d", type(tree).__name__, tree.line)
        visitor = NodeVisitor()
        self._register_rules(visitor)
        visitor.traverse(tree, ctx)
        logger.debug("analysis finished with %d diagnostic(s)", len(ctx.diagnostics))
        return AnalyzedProgram(
            program=tree,
            diagnostics=list(ctx.diagnostics),
            node_types=ctx.node_types,
        )

    def _register_rules(self, visitor: NodeVisitor):
        pre = [
            (NodeKind.PROGRAM, self._infer_void),
            (NodeKind.VARDECL, self._check_vardecl),
            (NodeKind.FUNCDECL, self._check_funcdecl),
            (NodeKind.BLOCK, self._infer_void),
            (NodeKind.LOCATION, self._infer_location),
            (NodeKind.LITERAL, self._infer_literal),
            (NodeKind.BINARYOP, self._infer_binaryop),
            (NodeKind.UNARYOP, self._infer_unaryop),
            (NodeKind.CONDITIONAL, self._infer_bool),
            (NodeKind.WHILELOOP, self._infer_bool),
            (NodeKind.BREAK, self._check_loop_control),
            (NodeKind.CONTINUE, self._check_loop_control),
            (NodeKind.RETURN, self._infer_return),
            (NodeKind.ASSIGNMENT, self._infer_void),
            (NodeKind.FUNCCALL, self._infer_funccall),
        ]
        post = [
            (NodeKind.PROGRAM, self._check_main),
            (NodeKind.LOCATION, self._check_location),
            (NodeKind.BINARYOP, self._check_binaryop),
            (NodeKind.UNARYOP, self._check_unaryop),
            (NodeKind.CONDITIONAL, self._check_condition),
            (NodeKind.WHILELOOP, self._check_condition),
            (NodeKind.RETURN, self._check_return),
            (NodeKind.ASSIGNMENT, self._check_assignment),
            (NodeKind.FUNCCALL, self._check_funccall),
        ]
        for kind, callback in pre:
            visitor.register(kind, Phase.PRE, callback)
        for kind, callback in post:
            visitor.register(kind, Phase.POST, callback)

    def _set_type(self, node: Node, type_: DecafType, ctx: AnalysisContext):
        if id(node) in ctx.node_types:
            raise AnalyzerError(
                f"Type of {type(node).__name__} already inferred", node.line)
        ctx.node_types[id(node)] = type_
        node.inferred_type = type_
