"""Pre-order type inference for nodes whose type is structurally determined."""

from ..ast_nodes import DecafType


class TypeInferenceMixin:

    def _infer_void(self, node, ctx):
        self._set_type(node, DecafType.VOID, ctx)

    def _infer_bool(self, node, ctx):
        self._set_type(node, DecafType.BOOL, ctx)

    def _infer_literal(self, node, ctx):
        self._set_type(node, node.type, ctx)

    def _infer_location(self, node, ctx):
        symbol = ctx.lookup(node.name)
        if symbol is None:
            ctx.error(f"Symbol '{node.name}' undefined on line {node.line}", node.line)
            self._set_type(node, DecafType.VOID, ctx)
        else:
            self._set_type(node, symbol.type, ctx)

    def _infer_funccall(self, node, ctx):
        symbol = ctx.lookup(node.name)
        if symbol is None:
            ctx.error(f"Symbol '{node.name}' undefined on line {node.line}", node.line)
            self._set_type(node, DecafType.VOID, ctx)
        else:
            self._set_type(node, symbol.type, ctx)

    def _infer_binaryop(self, node, ctx):
        self._set_type(node, self._binary_result_type(node.operator), ctx)

    def _infer_unaryop(self, node, ctx):
        self._set_type(node, self._unary_type(node.operator), ctx)

    def _infer_return(self, node, ctx):
        func = ctx.lookup_function(ctx.current_function)
        self._set_type(node, func.type if func else DecafType.VOID, ctx)
