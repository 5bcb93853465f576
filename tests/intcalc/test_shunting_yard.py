"""Tests for infix to postfix conversion."""

import pytest

from intcalc import IntCalcParenthesisMismatchError, IntCalcShuntingYard, IntCalcTokenType


@pytest.fixture
def converter():
    return IntCalcShuntingYard()


class TestShuntingYard:
    """Test operator precedence, associativity and grouping."""

    @pytest.mark.parametrize("expression,expected", [
        ("42", "42"),
        ("1+2", "1 2 +"),
        ("1+2*3", "1 2 3 * +"),
        ("(1+2)*3", "1 2 + 3 *"),
        ("8-3-1", "8 3 - 1 -"),
        ("8/4/2", "8 4 / 2 /"),
        ("2*3+4", "2 3 * 4 +"),
        ("1-2*3+4", "1 2 3 * - 4 +"),
        ("8-(3-1)", "8 3 1 - -"),
        ("((7))", "7"),
        ("(1+2)*(3-4)/5", "1 2 + 3 4 - * 5 /"),
    ])
    def test_postfix_text(self, calc, expression, expected):
        """Test postfix output for a range of expressions."""
        assert calc.format_postfix(expression) == expected

    def test_convert_tokens(self, converter, helpers):
        """Test conversion works directly on token lists."""
        infix = helpers.tokens(1, "+", 2, "*", 3)

        assert converter.convert(infix) == helpers.tokens(1, 2, 3, "*", "+")

    def test_output_has_no_parentheses(self, calc):
        """Test parentheses never reach the postfix output."""
        postfix = calc.to_postfix("((1+(2*3))-(4))")

        assert all(t.type in (IntCalcTokenType.INTEGER, IntCalcTokenType.OPERATOR) for t in postfix)

    def test_unmatched_right_paren(self, calc):
        """Test a ')' without a matching '(' is rejected."""
        with pytest.raises(IntCalcParenthesisMismatchError, match="Unmatched closing parenthesis"):
            calc.to_postfix("1+2)")

    def test_unmatched_right_paren_position(self, calc):
        """Test the error reports where the stray ')' is."""
        with pytest.raises(IntCalcParenthesisMismatchError) as exc_info:
            calc.to_postfix("(1)+2)")

        assert exc_info.value.position == 5

    def test_unmatched_left_paren(self, calc):
        """Test a '(' left open at the end of input is rejected."""
        with pytest.raises(IntCalcParenthesisMismatchError, match="Unmatched opening parenthesis") as exc_info:
            calc.to_postfix("(1+2")

        assert exc_info.value.position == 0

    def test_right_before_left(self, calc):
        """Test that ')(' does not count as balanced."""
        with pytest.raises(IntCalcParenthesisMismatchError):
            calc.to_postfix(")1+2(")

    def test_converter_is_reusable(self, converter, helpers):
        """Test a converter carries no state between calls."""
        with pytest.raises(IntCalcParenthesisMismatchError):
            converter.convert(helpers.tokens("(", 1))

        assert converter.convert(helpers.tokens(1, "-", 2)) == helpers.tokens(1, 2, "-")
