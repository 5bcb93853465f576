"""Evaluator for intcalc expression trees."""

from intcalc.intcalc_ast import (
    IntCalcASTAdd, IntCalcASTDivide, IntCalcASTInteger, IntCalcASTMultiply, IntCalcASTNode, IntCalcASTSubtract
)
from intcalc.intcalc_ast_visitor import IntCalcASTVisitor
from intcalc.intcalc_error import IntCalcDivisionByZeroError


class IntCalcEvaluator(IntCalcASTVisitor[int]):
    """Reduces an expression tree to its integer value."""

    def evaluate(self, node: IntCalcASTNode) -> int:
        """
        Evaluate an expression tree.

        Args:
            node: Root of the tree to evaluate

        Returns:
            The integer value of the expression

        Raises:
            IntCalcDivisionByZeroError: If any divisor evaluates to zero
        """
        return self.visit(node)

    def visit_IntCalcASTInteger(self, node: IntCalcASTInteger) -> int:  # pylint: disable=invalid-name
        return node.value

    def visit_IntCalcASTAdd(self, _node: IntCalcASTAdd, left: int, right: int) -> int:  # pylint: disable=invalid-name
        return left + right

    def visit_IntCalcASTSubtract(self, _node: IntCalcASTSubtract, left: int, right: int) -> int:  # pylint: disable=invalid-name
        return left - right

    def visit_IntCalcASTMultiply(self, _node: IntCalcASTMultiply, left: int, right: int) -> int:  # pylint: disable=invalid-name
        return left * right

    def visit_IntCalcASTDivide(self, node: IntCalcASTDivide, left: int, right: int) -> int:  # pylint: disable=invalid-name
        """
        Divide, truncating toward zero.

        Python's `//` floors, which differs from truncation when exactly one operand
        is negative (-7 // 2 is -4, whereas truncation gives -3).
        """
        if right == 0:
            divisor = node.right.describe() if isinstance(node.right, IntCalcASTInteger) else "a subexpression"
            raise IntCalcDivisionByZeroError(
                message="Division by zero",
                received=f"Divisor {divisor} evaluates to 0",
                context="The right operand of '/' must not be zero",
                suggestion="Check the divisor is not zero"
            )

        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            return -quotient

        return quotient
