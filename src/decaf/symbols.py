"""Symbols and scoped symbol tables.

Tables are built and attached to Program, FuncDecl and Block nodes by the
symbol-table phase; static analysis only looks names up in them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto

from .ast_nodes import DecafType, Parameter


class SymbolKind(Enum):
    SCALAR = auto()
    ARRAY = auto()
    FUNCTION = auto()


@dataclass
class Symbol:
    name: str
    type: DecafType
    kind: SymbolKind = SymbolKind.SCALAR
    length: int = 1
    parameters: list[Parameter] = field(default_factory=list)
    line: int = 0

    @property
    def is_array(self) -> bool:
        return self.kind is SymbolKind.ARRAY or self.length > 1

    @property
    def is_function(self) -> bool:
        return self.kind is SymbolKind.FUNCTION


@dataclass(eq=False)
class SymbolTable:
    local_symbols: list[Symbol] = field(default_factory=list)
    parent: SymbolTable | None = field(default=None, repr=False)

    def lookup(self, name: str) -> Symbol | None:
        symbol = self.lookup_local(name)
        if symbol is not None:
            return symbol
        if self.parent:
            return self.parent.lookup(name)
        return None

    def lookup_local(self, name: str) -> Symbol | None:
        for symbol in self.local_symbols:
            if symbol.name == name:
                return symbol
        return None

    def count_local(self, name: str) -> int:
        return sum(1 for symbol in self.local_symbols if symbol.name == name)
