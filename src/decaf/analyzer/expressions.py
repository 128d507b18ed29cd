"""Expression checks: operators, locations, and function calls."""

from ..ast_nodes import DecafType


class ExpressionsMixin:

    def _check_binaryop(self, node, ctx):
        op = node.operator
        left = node.left.inferred_type
        right = node.right.inferred_type
        required = self._binary_operand_type(op)
        if required is None:
            if left != right:
                ctx.error(
                    f"Invalid binary operation on line {node.line}. Expected values "
                    f"to be of the same type, but was '{left} {op} {right}'",
                    node.line)
        elif left != required or right != required:
            ctx.error(
                f"Invalid binary operation on line {node.line}. Expected "
                f"'{required} {op} {required}' but was '{left} {op} {right}'",
                node.line)

    def _check_unaryop(self, node, ctx):
        op = node.operator
        expected = node.inferred_type
        actual = node.child.inferred_type
        if expected != actual:
            ctx.error(
                f"Invalid unary operation on line {node.line}. Expected "
                f"'{op}{expected}' but was '{op}{actual}'", node.line)

    def _check_location(self, node, ctx):
        symbol = ctx.lookup(node.name)
        if symbol is None:
            return
        if node.index is None:
            if symbol.is_array:
                ctx.error(f"Invalid array access on line {node.line}. "
                          f"Array '{node.name}' used as scalar", node.line)
            return
        if not symbol.is_array:
            ctx.error(f"Invalid array access on line {node.line}. "
                      f"Scalar '{node.name}' used as array", node.line)
            return
        index_type = node.index.inferred_type
        if index_type not in (DecafType.INT, DecafType.VOID):
            ctx.error(f"Invalid array index on line {node.line}. "
                      f"Expected 'int' but was '{index_type}'", node.line)
            return
        index = self._literal_index(node.index)
        if index is not None and not 0 <= index < symbol.length:
            ctx.error(
                f"Invalid array access on line {node.line}. Index {index} of "
                f"'{node.name}' is out of bounds for length {symbol.length}",
                node.line)

    def _check_funccall(self, node, ctx):
        symbol = ctx.lookup(node.name)
        if symbol is None:
            return
        if not symbol.is_function:
            ctx.error(f"'{node.name}' is not a function on line {node.line}", node.line)
            return
        expected, actual = len(symbol.parameters), len(node.arguments)
        if expected != actual:
            ctx.error(f"Invalid number of arguments on line {node.line}. "
                      f"Expected {expected} but was {actual}", node.line)
        for position, (param, arg) in enumerate(
                zip(symbol.parameters, node.arguments), start=1):
            arg_type = arg.inferred_type
            # VOID arguments come from unresolved names, already reported
            if arg_type is DecafType.VOID or arg_type == param.type:
                continue
            ctx.error(
                f"Invalid argument type on line {node.line}. Expected "
                f"'{param.type}' for argument {position} but was '{arg_type}'",
                node.line)
