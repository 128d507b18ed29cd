"""Traversal engine: pre/post-order callback dispatch over Decaf ASTs.

Rules are registered per (node kind, phase). For each node the engine runs
its PRE callbacks, visits the children in source order inside
``state.enter(node)``, then runs its POST callbacks. The engine itself does
no checking.
"""

from __future__ import annotations
from collections import defaultdict
from contextlib import AbstractContextManager
from enum import Enum, auto
from typing import Callable, Protocol

from .ast_nodes import (
    Assignment, BinaryOp, Block, Break, Conditional, Continue, FuncCall,
    FuncDecl, Literal, Location, Node, NodeKind, Program, Return, UnaryOp,
    VarDecl, WhileLoop,
)


class Phase(Enum):
    PRE = auto()
    POST = auto()


class TraversalState(Protocol):
    def enter(self, node: Node) -> AbstractContextManager[None]: ...


Callback = Callable[[Node, TraversalState], None]


def children(node: Node) -> list[Node]:
    """Return the child nodes of ``node`` in lexical order."""
    match node:
        case Program():
            return [*node.variables, *node.functions]
        case FuncDecl():
            return [node.body] if node.body is not None else []
        case Block():
            return [*node.variables, *node.statements]
        case Location():
            return [node.index] if node.index is not None else []
        case BinaryOp():
            return [node.left, node.right]
        case UnaryOp():
            return [node.child]
        case Conditional():
            branches = [node.condition, node.if_block]
            if node.else_block is not None:
                branches.append(node.else_block)
            return branches
        case WhileLoop():
            return [node.condition, node.body]
        case Return():
            return [node.value] if node.value is not None else []
        case Assignment():
            return [node.location, node.value]
        case FuncCall():
            return list(node.arguments)
        case VarDecl() | Literal() | Break() | Continue():
            return []
        case _:
            raise TypeError(f"Unknown AST node type '{type(node).__name__}'")


class NodeVisitor:
    """Dispatches registered callbacks over a tree, depth first."""

    def __init__(self):
        self._callbacks: dict[tuple[NodeKind, Phase], list[Callback]] = defaultdict(list)

    def register(self, kind: NodeKind, phase: Phase, callback: Callback):
        self._callbacks[(kind, phase)].append(callback)

    def traverse(self, root: Node, state: TraversalState):
        self._visit(root, state)

    def _visit(self, node: Node, state: TraversalState):
        for callback in self._callbacks.get((node.kind, Phase.PRE), ()):
            callback(node, state)
        with state.enter(node):
            for child in children(node):
                self._visit(child, state)
        for callback in self._callbacks.get((node.kind, Phase.POST), ()):
            callback(node, state)
