"""Declaration validation: void/reserved names, array sizes, duplicates, main."""

from ..ast_nodes import DecafType, FuncDecl


class ValidationMixin:

    def _check_vardecl(self, node, ctx):
        if node.type == DecafType.VOID:
            ctx.error(f"Void variable '{node.name}' on line {node.line}", node.line)
        if node.name == "main":
            ctx.error(f"Invalid variable name '{node.name}' on line {node.line}", node.line)
        if node.is_array and node.array_length < 1:
            ctx.error(
                f"Invalid array declaration '{node.name}' on line {node.line}. "
                f"Array length must be greater than 0 but was {node.array_length}",
                node.line)
        self._check_duplicate(node, ctx)
        self._set_type(node, node.type, ctx)

    def _check_funcdecl(self, node, ctx):
        # still in the enclosing scope: the function's own table is entered next
        self._check_duplicate(node, ctx)
        seen: set[str] = set()
        for param in node.parameters:
            if param.name in seen:
                ctx.error(f"Duplicate parameter '{param.name}' in function "
                          f"'{node.name}' on line {node.line}", node.line)
            seen.add(param.name)
        self._set_type(node, node.return_type, ctx)

    def _check_duplicate(self, node, ctx):
        """Report every declaration of a name after its first in the same scope."""
        scope = ctx.scope
        if scope is None:
            return
        seen = ctx.declared.setdefault(id(scope), set())
        if node.name in seen and scope.count_local(node.name) > 1:
            ctx.error(f"Duplicate symbol '{node.name}' on line {node.line}", node.line)
        seen.add(node.name)

    def _check_main(self, node, ctx):
        if not self.require_main or node.symbol_table is None:
            return
        main = next((s for s in node.symbol_table.local_symbols
                     if s.name == "main" and s.is_function), None)
        if main is None:
            ctx.error("Program does not contain a main function")
            return
        if main.parameters:
            decl = next((f for f in node.functions
                         if isinstance(f, FuncDecl) and f.name == "main"), None)
            line = decl.line if decl is not None else main.line
            ctx.error(f"Main method on line {line} should not have any parameters", line)
