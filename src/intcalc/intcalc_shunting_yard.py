"""Infix to postfix conversion for intcalc token sequences."""

import logging
from typing import List

from intcalc.intcalc_error import IntCalcParenthesisMismatchError
from intcalc.intcalc_token import IntCalcOperator, IntCalcToken, IntCalcTokenType


class IntCalcShuntingYard:
    """
    Converts infix token sequences to postfix using the shunting-yard algorithm.

    The operator stack is local to each `convert` call, so a single instance may be
    reused for any number of conversions.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("IntCalcShuntingYard")

    def convert(self, tokens: List[IntCalcToken]) -> List[IntCalcToken]:
        """
        Convert an infix token sequence to postfix.

        Args:
            tokens: Infix tokens as produced by the tokenizer

        Returns:
            Equivalent postfix tokens, containing no parentheses

        Raises:
            IntCalcParenthesisMismatchError: If the parentheses are unbalanced
        """
        output: List[IntCalcToken] = []
        stack: List[IntCalcToken] = []

        for token in tokens:
            if token.type == IntCalcTokenType.INTEGER:
                output.append(token)
                continue

            if token.type == IntCalcTokenType.LPAREN:
                stack.append(token)
                continue

            if token.type == IntCalcTokenType.RPAREN:
                self._close_group(token, stack, output)
                continue

            assert isinstance(token.value, IntCalcOperator), f"Unexpected token: {token!r}"
            op = token.value
            while stack and self._should_pop(stack[-1], op):
                output.append(stack.pop())

            stack.append(token)

        while stack:
            token = stack.pop()
            if token.type == IntCalcTokenType.LPAREN:
                raise IntCalcParenthesisMismatchError(
                    message="Unmatched opening parenthesis",
                    position=token.position,
                    received="'(' with no matching ')'",
                    expected="A ')' closing every '('",
                    example="Correct: (1+2)*3\\nIncorrect: (1+2*3",
                    suggestion="Add the missing ')' or remove the extra '('"
                )

            output.append(token)

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("postfix: %s", self.format_postfix(output, brief=True))

        return output

    def _close_group(self, token: IntCalcToken, stack: List[IntCalcToken], output: List[IntCalcToken]) -> None:
        """Pop operators into the output until the matching '(' is found and discarded."""
        while stack:
            top = stack.pop()
            if top.type == IntCalcTokenType.LPAREN:
                return

            output.append(top)

        raise IntCalcParenthesisMismatchError(
            message="Unmatched closing parenthesis",
            position=token.position,
            received="')' with no matching '('",
            expected="A '(' before every ')'",
            example="Correct: (1+2)\\nIncorrect: 1+2)",
            suggestion="Add the missing '(' or remove the extra ')'"
        )

    def _should_pop(self, top: IntCalcToken, op: IntCalcOperator) -> bool:
        """
        Decide whether the operator on top of the stack binds before an incoming operator.

        Args:
            top: Token on top of the operator stack
            op: The incoming operator

        Returns:
            True if `top` must be emitted before `op` is pushed
        """
        if not isinstance(top.value, IntCalcOperator):
            return False

        if top.value.precedence > op.precedence:
            return True

        return top.value.precedence == op.precedence and op.is_left_associative

    @staticmethod
    def format_postfix(tokens: List[IntCalcToken], brief: bool = False) -> str:
        """
        Render a token sequence as space-separated text.

        Args:
            tokens: Tokens to render
            brief: Summarise integers too long to convert to text instead of raising

        Returns:
            Text such as "1 2 3 * +"
        """
        return " ".join(token.describe(brief) for token in tokens)
