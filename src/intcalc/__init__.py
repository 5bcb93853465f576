"""intcalc: integer arithmetic expression calculator."""

# Main API
from intcalc.intcalc import IntCalc

# Exceptions (for error handling)
from intcalc.intcalc_error import (
    IntCalcError, IntCalcUsageError, IntCalcParseError, IntCalcParenthesisMismatchError,
    IntCalcMalformedExpressionError, IntCalcEvalError, IntCalcDivisionByZeroError
)

# Expression tree
from intcalc.intcalc_ast import (
    IntCalcASTNode, IntCalcASTInteger, IntCalcASTBinary, IntCalcASTAdd, IntCalcASTSubtract,
    IntCalcASTMultiply, IntCalcASTDivide
)
from intcalc.intcalc_ast_visitor import IntCalcASTVisitor

# Lower-level components (for advanced usage)
from intcalc.intcalc_token import IntCalcToken, IntCalcTokenType, IntCalcOperator, IntCalcOperatorKind
from intcalc.intcalc_tokenizer import IntCalcTokenizer
from intcalc.intcalc_shunting_yard import IntCalcShuntingYard
from intcalc.intcalc_tree_builder import IntCalcTreeBuilder
from intcalc.intcalc_evaluator import IntCalcEvaluator
from intcalc.intcalc_formatter import IntCalcFormatter
from intcalc.intcalc_settings import IntCalcSettings


__all__ = [
    # Main API
    "IntCalc",

    # Exceptions
    "IntCalcError", "IntCalcUsageError", "IntCalcParseError", "IntCalcParenthesisMismatchError",
    "IntCalcMalformedExpressionError", "IntCalcEvalError", "IntCalcDivisionByZeroError",

    # Expression tree
    "IntCalcASTNode", "IntCalcASTInteger", "IntCalcASTBinary", "IntCalcASTAdd", "IntCalcASTSubtract",
    "IntCalcASTMultiply", "IntCalcASTDivide", "IntCalcASTVisitor",

    # Lower-level components
    "IntCalcToken", "IntCalcTokenType", "IntCalcOperator", "IntCalcOperatorKind", "IntCalcTokenizer",
    "IntCalcShuntingYard", "IntCalcTreeBuilder", "IntCalcEvaluator", "IntCalcFormatter", "IntCalcSettings"
]
