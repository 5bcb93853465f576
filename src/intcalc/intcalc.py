"""Main intcalc class running the full expression pipeline."""

import logging
from typing import List

from intcalc.intcalc_ast import IntCalcASTNode
from intcalc.intcalc_evaluator import IntCalcEvaluator
from intcalc.intcalc_formatter import IntCalcFormatter
from intcalc.intcalc_shunting_yard import IntCalcShuntingYard
from intcalc.intcalc_token import IntCalcToken, describe_integer
from intcalc.intcalc_tokenizer import IntCalcTokenizer
from intcalc.intcalc_tree_builder import IntCalcTreeBuilder


class IntCalc:
    """
    Integer arithmetic calculator supporting +, -, *, / and parentheses.

    Evaluation runs four stages, each consuming the previous stage's full output:
    - tokenize the text
    - convert infix tokens to postfix (shunting-yard)
    - build an expression tree from the postfix tokens
    - evaluate the tree

    Every call creates fresh pipeline objects, so an instance holds no state between
    calls and can be shared freely.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("IntCalc")

    def tokenize(self, expression: str) -> List[IntCalcToken]:
        """Tokenize an expression into infix tokens."""
        return IntCalcTokenizer().tokenize(expression)

    def to_postfix(self, expression: str) -> List[IntCalcToken]:
        """
        Convert an expression to postfix tokens.

        Raises:
            IntCalcParenthesisMismatchError: If the parentheses are unbalanced
        """
        return IntCalcShuntingYard().convert(self.tokenize(expression))

    def parse(self, expression: str) -> IntCalcASTNode:
        """
        Parse an expression into an expression tree.

        Args:
            expression: Expression string to parse

        Returns:
            Root node of the expression tree

        Raises:
            IntCalcParenthesisMismatchError: If the parentheses are unbalanced
            IntCalcMalformedExpressionError: If the tokens do not form one expression
        """
        return IntCalcTreeBuilder().build(self.to_postfix(expression))

    def evaluate(self, expression: str) -> int:
        """
        Evaluate an expression.

        Args:
            expression: Expression string to evaluate

        Returns:
            The integer result

        Raises:
            IntCalcParseError: If the expression is structurally invalid
            IntCalcEvalError: If evaluation fails, including division by zero
        """
        tree = self.parse(expression)
        result = IntCalcEvaluator().evaluate(tree)
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("evaluated %d characters to %s", len(expression), describe_integer(result))

        return result

    def format_postfix(self, expression: str) -> str:
        """
        Return the postfix form of an expression as space-separated text.

        Raises:
            IntCalcParenthesisMismatchError: If the parentheses are unbalanced
            ValueError: If an integer exceeds Python's integer string conversion limit
        """
        return IntCalcShuntingYard.format_postfix(self.to_postfix(expression))

    def format_infix(self, expression: str) -> str:
        """
        Return the canonical infix form of an expression with minimal parentheses.

        Raises:
            IntCalcParseError: If the expression is structurally invalid
            ValueError: If an integer exceeds Python's integer string conversion limit
        """
        tree = self.parse(expression)
        return IntCalcFormatter().format(tree)
