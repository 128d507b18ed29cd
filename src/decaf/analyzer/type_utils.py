"""Type utilities: operator classes and constant index folding."""

from __future__ import annotations

from ..ast_nodes import (
    BinaryOpType, DecafType, Literal, UnaryOp, UnaryOpType,
)

LOGICAL_OPS = frozenset({BinaryOpType.OR, BinaryOpType.AND})
EQUALITY_OPS = frozenset({BinaryOpType.EQ, BinaryOpType.NEQ})
RELATIONAL_OPS = frozenset({
    BinaryOpType.LT, BinaryOpType.LE, BinaryOpType.GE, BinaryOpType.GT,
})
ARITHMETIC_OPS = frozenset({
    BinaryOpType.ADD, BinaryOpType.SUB, BinaryOpType.MUL,
    BinaryOpType.DIV, BinaryOpType.MOD,
})


class TypeUtilsMixin:

    def _binary_result_type(self, op: BinaryOpType) -> DecafType:
        if op in ARITHMETIC_OPS:
            return DecafType.INT
        return DecafType.BOOL

    def _binary_operand_type(self, op: BinaryOpType) -> DecafType | None:
        """Operand type an operator requires; None when both sides only need to agree."""
        if op in LOGICAL_OPS:
            return DecafType.BOOL
        if op in EQUALITY_OPS:
            return None
        return DecafType.INT

    def _unary_type(self, op: UnaryOpType) -> DecafType:
        # operand and result types coincide for both unary operators
        if op is UnaryOpType.NEG:
            return DecafType.INT
        return DecafType.BOOL

    def _literal_index(self, index) -> int | None:
        """Value of an integer literal index, including a negated literal."""
        if isinstance(index, Literal) and index.type is DecafType.INT:
            return index.value
        if (isinstance(index, UnaryOp) and index.operator is UnaryOpType.NEG
                and isinstance(index.child, Literal)
                and index.child.type is DecafType.INT):
            return -index.child.value
        return None
