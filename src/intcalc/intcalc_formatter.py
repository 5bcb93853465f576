"""Renders intcalc expression trees back to infix text."""

from intcalc.intcalc_ast import IntCalcASTBinary, IntCalcASTInteger, IntCalcASTNode
from intcalc.intcalc_ast_visitor import IntCalcASTVisitor


class IntCalcFormatter(IntCalcASTVisitor[str]):
    """
    Formats an expression tree as infix text using as few parentheses as possible.

    The output re-parses to a tree identical to the one formatted. A child is only
    wrapped when its operator binds more loosely than its parent's, or when it is the
    right operand of an operator with the same precedence (so `8-(3-1)` keeps its
    grouping while `8-3-1` needs none).
    """

    def format(self, node: IntCalcASTNode) -> str:
        """
        Format an expression tree.

        Args:
            node: Root of the tree to format

        Returns:
            Infix text such as "(1+2)*3"
        """
        return self.visit(node)

    def visit_IntCalcASTInteger(self, node: IntCalcASTInteger) -> str:  # pylint: disable=invalid-name
        return str(node.value)

    def _format_binary(self, node: IntCalcASTBinary, left: str, right: str) -> str:
        op = node.operator

        if isinstance(node.left, IntCalcASTBinary):
            left_op = node.left.operator
            if left_op.precedence < op.precedence or (
                left_op.precedence == op.precedence and not op.is_left_associative
            ):
                left = f"({left})"

        if isinstance(node.right, IntCalcASTBinary):
            right_op = node.right.operator
            if right_op.precedence < op.precedence or (
                right_op.precedence == op.precedence and op.is_left_associative
            ):
                right = f"({right})"

        return f"{left}{op.symbol}{right}"

    visit_IntCalcASTAdd = _format_binary
    visit_IntCalcASTSubtract = _format_binary
    visit_IntCalcASTMultiply = _format_binary
    visit_IntCalcASTDivide = _format_binary
