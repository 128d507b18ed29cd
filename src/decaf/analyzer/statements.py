"""Statement checks: assignment, conditions, loop control, and return."""

from ..ast_nodes import Break, DecafType


class StatementsMixin:

    def _check_loop_control(self, node, ctx):
        self._set_type(node, DecafType.VOID, ctx)
        if ctx.loop_depth == 0:
            keyword = "break" if isinstance(node, Break) else "continue"
            ctx.error(f"Invalid {keyword} on line {node.line}", node.line)

    def _check_condition(self, node, ctx):
        actual = node.condition.inferred_type
        if actual != DecafType.BOOL:
            ctx.error(
                f"Invalid condition on line {node.line}. Expected condition to be "
                f"of type '{DecafType.BOOL}', but was '{actual}'", node.line)

    def _check_assignment(self, node, ctx):
        expected = node.location.inferred_type
        actual = node.value.inferred_type
        if expected != actual:
            ctx.error(
                f"Type mismatch on line {node.line}. Expected '{node.location.name}' "
                f"to be of type '{expected}', but was '{actual}'", node.line)

    def _check_return(self, node, ctx):
        expected = node.inferred_type
        if node.value is None:
            if expected != DecafType.VOID:
                self._return_mismatch(node, expected, DecafType.VOID, ctx)
            return
        actual = node.value.inferred_type
        if actual == DecafType.VOID:
            return
        if actual != expected:
            self._return_mismatch(node, expected, actual, ctx)

    def _return_mismatch(self, node, expected, actual, ctx):
        ctx.error(
            f"Type mismatch on line {node.line}. Expected method to return type "
            f"to be '{expected}', but was '{actual}'", node.line)
