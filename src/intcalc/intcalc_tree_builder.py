"""Builds intcalc expression trees from postfix token sequences."""

import logging
from typing import List

from intcalc.intcalc_ast import BINARY_NODE_TYPES, IntCalcASTInteger, IntCalcASTNode
from intcalc.intcalc_error import IntCalcMalformedExpressionError
from intcalc.intcalc_token import IntCalcOperator, IntCalcToken, IntCalcTokenType


class IntCalcTreeBuilder:
    """Builds a single expression tree from a postfix token sequence."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("IntCalcTreeBuilder")

    def build(self, tokens: List[IntCalcToken]) -> IntCalcASTNode:
        """
        Build an expression tree from postfix tokens.

        Args:
            tokens: Postfix tokens as produced by the shunting-yard converter

        Returns:
            Root node of the expression tree

        Raises:
            IntCalcMalformedExpressionError: If the tokens do not form exactly one expression
        """
        if not tokens:
            raise IntCalcMalformedExpressionError(
                message="Empty expression",
                expected="At least one integer",
                example="1+2*3",
                suggestion="Provide a complete expression to evaluate",
                context="Expression cannot be empty or contain only ignored characters"
            )

        stack: List[IntCalcASTNode] = []

        for token in tokens:
            if token.type == IntCalcTokenType.INTEGER:
                assert isinstance(token.value, int)
                stack.append(IntCalcASTInteger(token.value))
                continue

            if token.type != IntCalcTokenType.OPERATOR:
                raise IntCalcMalformedExpressionError(
                    message=f"Unexpected parenthesis in postfix expression: {token.describe()}",
                    position=token.position,
                    received=f"Token: {token.describe()}",
                    expected="Only integers and operators",
                    context="Postfix sequences must be produced by the shunting-yard converter"
                )

            assert isinstance(token.value, IntCalcOperator)
            if len(stack) < 2:
                raise IntCalcMalformedExpressionError(
                    message=f"Operator '{token.describe()}' is missing an operand",
                    position=token.position,
                    received=f"{len(stack)} operand(s) available",
                    expected="Two operands for every operator",
                    example="Correct: 1+2\\nIncorrect: 1+ or *2",
                    suggestion="Add the missing number or remove the extra operator"
                )

            right = stack.pop()
            left = stack.pop()
            stack.append(BINARY_NODE_TYPES[token.value.kind](left, right))

        if len(stack) > 1:
            raise IntCalcMalformedExpressionError(
                message="Missing operator between operands",
                received=f"{len(stack)} separate expressions",
                expected="A single expression",
                example="Correct: 1+2\\nIncorrect: 1 2 or (1)(2)",
                suggestion="Join the values with an operator such as + or *"
            )

        root = stack.pop()
        self._logger.debug("built tree from %d postfix tokens", len(tokens))
        return root
