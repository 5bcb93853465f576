"""Shared fixtures and utilities for intcalc tests."""

from typing import List

import pytest

from intcalc import IntCalc, IntCalcOperator, IntCalcOperatorKind, IntCalcToken


@pytest.fixture
def calc():
    """Create a fresh IntCalc instance for each test."""
    return IntCalc()


class IntCalcTestHelpers:
    """Helper utilities for intcalc testing."""

    @staticmethod
    def op(symbol: str) -> IntCalcToken:
        """Build an operator token from its symbol."""
        return IntCalcToken.operator(IntCalcOperator.from_kind(IntCalcOperatorKind(symbol)))

    @staticmethod
    def tokens(*items: object) -> List[IntCalcToken]:
        """Build a token list from ints, operator symbols and parentheses."""
        result = []
        for item in items:
            if isinstance(item, int):
                result.append(IntCalcToken.integer(item))
            elif item == "(":
                result.append(IntCalcToken.lparen())
            elif item == ")":
                result.append(IntCalcToken.rparen())
            else:
                result.append(IntCalcTestHelpers.op(str(item)))

        return result

    @staticmethod
    def build_nested_expression(depth: int) -> str:
        """Build an expression nested `depth` parentheses deep, e.g. (((1)+1)+1)."""
        expression = "1"
        for _ in range(depth):
            expression = f"({expression}+1)"

        return expression


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return IntCalcTestHelpers
