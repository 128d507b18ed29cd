"""AST node definitions for the Decaf language.

Nodes are produced by the parser and decorated with symbol tables by the
symbol-table phase. Static analysis only reads them and records one derived
fact per node: its inferred type.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Optional, Union

if TYPE_CHECKING:
    from .symbols import SymbolTable


class DecafType(Enum):
    UNKNOWN = "unknown"
    INT = "int"
    BOOL = "bool"
    VOID = "void"
    STR = "str"

    def __str__(self) -> str:
        return self.value


class BinaryOpType(Enum):
    OR = "||"
    AND = "&&"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    LE = "<="
    GE = ">="
    GT = ">"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    def __str__(self) -> str:
        return self.value


class UnaryOpType(Enum):
    NEG = "-"
    NOT = "!"

    def __str__(self) -> str:
        return self.value


class NodeKind(Enum):
    PROGRAM = auto()
    VARDECL = auto()
    FUNCDECL = auto()
    BLOCK = auto()
    LOCATION = auto()
    LITERAL = auto()
    BINARYOP = auto()
    UNARYOP = auto()
    CONDITIONAL = auto()
    WHILELOOP = auto()
    BREAK = auto()
    CONTINUE = auto()
    RETURN = auto()
    ASSIGNMENT = auto()
    FUNCCALL = auto()


@dataclass
class Node:
    kind: ClassVar[NodeKind]
    line: int = field(default=0, kw_only=True)
    inferred_type: Optional[DecafType] = field(
        default=None, kw_only=True, compare=False, repr=False)

    def get_attribute(self, name: str):
        """By-name attribute lookup used by later phases (only "type")."""
        if name == "type":
            return self.inferred_type
        raise KeyError(name)


@dataclass
class Parameter:
    name: str = ""
    type: DecafType = DecafType.UNKNOWN


@dataclass
class Program(Node):
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM
    variables: list[VarDecl] = field(default_factory=list)
    functions: list[FuncDecl] = field(default_factory=list)
    symbol_table: Optional[SymbolTable] = field(
        default=None, kw_only=True, compare=False, repr=False)

@dataclass
class VarDecl(Node):
    kind: ClassVar[NodeKind] = NodeKind.VARDECL
    name: str = ""
    type: DecafType = DecafType.UNKNOWN
    is_array: bool = False
    array_length: int = 1

@dataclass
class FuncDecl(Node):
    kind: ClassVar[NodeKind] = NodeKind.FUNCDECL
    name: str = ""
    return_type: DecafType = DecafType.VOID
    parameters: list[Parameter] = field(default_factory=list)
    body: Optional[Block] = None
    symbol_table: Optional[SymbolTable] = field(
        default=None, kw_only=True, compare=False, repr=False)

@dataclass
class Block(Node):
    kind: ClassVar[NodeKind] = NodeKind.BLOCK
    variables: list[VarDecl] = field(default_factory=list)
    statements: list[stmt] = field(default_factory=list)
    symbol_table: Optional[SymbolTable] = field(
        default=None, kw_only=True, compare=False, repr=False)

@dataclass
class Location(Node):
    kind: ClassVar[NodeKind] = NodeKind.LOCATION
    name: str = ""
    index: Optional[expr] = None

@dataclass
class Literal(Node):
    kind: ClassVar[NodeKind] = NodeKind.LITERAL
    type: DecafType = DecafType.INT
    value: Union[int, bool, str] = 0

@dataclass
class BinaryOp(Node):
    kind: ClassVar[NodeKind] = NodeKind.BINARYOP
    operator: BinaryOpType = BinaryOpType.ADD
    left: expr = None
    right: expr = None

@dataclass
class UnaryOp(Node):
    kind: ClassVar[NodeKind] = NodeKind.UNARYOP
    operator: UnaryOpType = UnaryOpType.NEG
    child: expr = None

@dataclass
class Conditional(Node):
    kind: ClassVar[NodeKind] = NodeKind.CONDITIONAL
    condition: expr = None
    if_block: Block = None
    else_block: Optional[Block] = None

@dataclass
class WhileLoop(Node):
    kind: ClassVar[NodeKind] = NodeKind.WHILELOOP
    condition: expr = None
    body: Block = None

@dataclass
class Break(Node):
    kind: ClassVar[NodeKind] = NodeKind.BREAK

@dataclass
class Continue(Node):
    kind: ClassVar[NodeKind] = NodeKind.CONTINUE

@dataclass
class Return(Node):
    kind: ClassVar[NodeKind] = NodeKind.RETURN
    value: Optional[expr] = None

@dataclass
class Assignment(Node):
    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT
    location: Location = None
    value: expr = None

@dataclass
class FuncCall(Node):
    kind: ClassVar[NodeKind] = NodeKind.FUNCCALL
    name: str = ""
    arguments: list[expr] = field(default_factory=list)


# --- Union type aliases for sum types ---

expr = Union[Location, Literal, BinaryOp, UnaryOp, FuncCall]
stmt = Union[Assignment, FuncCall, Conditional, WhileLoop, Return, Break, Continue, Block]
scope_node = Union[Program, FuncDecl, Block]
