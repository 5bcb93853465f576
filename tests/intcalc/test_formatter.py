"""Tests for rendering expression trees back to infix text."""

import pytest

from intcalc import IntCalcASTInteger, IntCalcASTMultiply, IntCalcASTSubtract, IntCalcFormatter


class TestFormatter:
    """Test infix formatting with minimal parentheses."""

    @pytest.mark.parametrize("expression,expected", [
        ("42", "42"),
        ("1 + 2", "1+2"),
        ("1+2*3", "1+2*3"),
        ("(1+2)*3", "(1+2)*3"),
        ("((1+2))*(3)", "(1+2)*3"),
        ("8-3-1", "8-3-1"),
        ("(8-3)-1", "8-3-1"),
        ("8-(3-1)", "8-(3-1)"),
        ("1+(2+3)", "1+(2+3)"),
        ("(2*3)+4", "2*3+4"),
        ("2*(3/4)", "2*(3/4)"),
        ("(1-2)*(3+4)/5", "(1-2)*(3+4)/5"),
    ])
    def test_format_infix(self, calc, expression, expected):
        assert calc.format_infix(expression) == expected

    @pytest.mark.parametrize("expression", [
        "8-(3-1)",
        "2*(9/4)",
        "((7-2)*(3+1))/(6-4)",
        "100/(10/(5-3))",
    ])
    def test_formatted_text_evaluates_the_same(self, calc, expression):
        """Test formatting preserves the structure, and hence the value, of the expression."""
        formatted = calc.format_infix(expression)

        assert calc.parse(formatted) == calc.parse(expression)
        assert calc.evaluate(formatted) == calc.evaluate(expression)

    def test_format_tree(self):
        tree = IntCalcASTMultiply(
            IntCalcASTSubtract(IntCalcASTInteger(5), IntCalcASTInteger(2)),
            IntCalcASTInteger(4)
        )

        assert IntCalcFormatter().format(tree) == "(5-2)*4"

    def test_format_long_flat_chain(self, calc):
        expression = "+".join(str(i) for i in range(2000))

        assert calc.format_infix(expression) == expression

    def test_format_deep_nesting(self, calc):
        expression = "1-(" * 2000 + "1" + ")" * 2000

        assert calc.format_infix(expression) == expression
