"""
Renders expression trees back to S-expression text.
"""

import math

from .ast_nodes import ASTVisitor, Expression

# A digit run whose float parse overflows; there is no literal spelling for inf
INF_LITERAL = "1" + "0" * 309 + ".0"


class ExprPrinter(ASTVisitor):
    """Visitor producing the source form of an expression."""

    def visit_integer(self, node) -> str:
        return str(node.value)

    def visit_float(self, node) -> str:
        value = node.value
        if value == math.inf:
            return INF_LITERAL
        text = repr(value)
        if "e" in text and abs(value) >= 1:
            # No exponent syntax; doubles this large are integral, so one decimal is exact
            return "%.1f" % value
        return text

    def visit_string(self, node) -> str:
        escaped = node.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def visit_keyword(self, node) -> str:
        return f":{node.value}"

    def visit_symbol(self, node) -> str:
        return node.value

    def visit_list(self, node) -> str:
        return "(" + " ".join(self.visit(element) for element in node.elements) + ")"

    def visit_quote(self, node) -> str:
        return "'" + self.visit(node.expr)


def format_expr(expr: Expression) -> str:
    """Render ``expr`` as S-expression text."""
    return ExprPrinter().visit(expr)
