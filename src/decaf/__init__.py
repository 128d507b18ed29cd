"""Decaf static analysis package."""

from .analyzer import Analyzer as Analyzer, analyze as analyze
from .symbols import Symbol as Symbol, SymbolKind as SymbolKind, SymbolTable as SymbolTable
from .visitor import NodeVisitor as NodeVisitor, Phase as Phase
