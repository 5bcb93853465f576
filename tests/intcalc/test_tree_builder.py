"""Tests for building expression trees from postfix tokens."""

import pytest

from intcalc import (
    IntCalcASTAdd, IntCalcASTDivide, IntCalcASTInteger, IntCalcASTMultiply, IntCalcASTSubtract,
    IntCalcMalformedExpressionError, IntCalcTreeBuilder
)


@pytest.fixture
def builder():
    return IntCalcTreeBuilder()


def count_leaves(node):
    if isinstance(node, IntCalcASTInteger):
        return 1

    return count_leaves(node.left) + count_leaves(node.right)


class TestTreeBuilder:
    """Test postfix to tree construction."""

    def test_single_integer(self, builder, helpers):
        assert builder.build(helpers.tokens(5)) == IntCalcASTInteger(5)

    def test_operand_order(self, builder, helpers):
        """Test the first value popped becomes the right operand."""
        tree = builder.build(helpers.tokens(8, 3, "-"))

        assert tree == IntCalcASTSubtract(IntCalcASTInteger(8), IntCalcASTInteger(3))

    def test_precedence_shape(self, calc):
        """Test 1+2*3 builds Add(1, Multiply(2, 3))."""
        tree = calc.parse("1+2*3")

        assert tree == IntCalcASTAdd(
            IntCalcASTInteger(1),
            IntCalcASTMultiply(IntCalcASTInteger(2), IntCalcASTInteger(3))
        )

    def test_left_associative_shape(self, calc):
        """Test 8-3-1 builds Subtract(Subtract(8, 3), 1)."""
        tree = calc.parse("8-3-1")

        assert tree == IntCalcASTSubtract(
            IntCalcASTSubtract(IntCalcASTInteger(8), IntCalcASTInteger(3)),
            IntCalcASTInteger(1)
        )

    def test_node_kinds(self, calc):
        """Test each operator maps to its own node type."""
        assert isinstance(calc.parse("1+1"), IntCalcASTAdd)
        assert isinstance(calc.parse("1-1"), IntCalcASTSubtract)
        assert isinstance(calc.parse("1*1"), IntCalcASTMultiply)
        assert isinstance(calc.parse("1/1"), IntCalcASTDivide)

    def test_leaf_count_matches_integers(self, calc):
        """Test the tree has one leaf per integer in the input."""
        tree = calc.parse("(1+2)*3-4/(5+6)")

        assert count_leaves(tree) == 6

    def test_trees_are_immutable(self, calc):
        tree = calc.parse("1+2")

        with pytest.raises(AttributeError):
            tree.left = IntCalcASTInteger(9)

    def test_deep_tree_builds(self, calc, helpers):
        """Test building does not recurse, so very deep trees can be built."""
        tree = calc.parse(helpers.build_nested_expression(3000))

        assert isinstance(tree, IntCalcASTAdd)

    @pytest.mark.parametrize("items", [
        (1, "+"),
        ("+",),
        (1, 2, "+", "*"),
    ])
    def test_missing_operand(self, builder, helpers, items):
        """Test operators without two operands are rejected."""
        with pytest.raises(IntCalcMalformedExpressionError, match="missing an operand"):
            builder.build(helpers.tokens(*items))

    def test_leftover_operands(self, builder, helpers):
        """Test extra values with no operator are rejected."""
        with pytest.raises(IntCalcMalformedExpressionError, match="Missing operator"):
            builder.build(helpers.tokens(1, 2))

    def test_empty(self, builder):
        with pytest.raises(IntCalcMalformedExpressionError, match="Empty expression"):
            builder.build([])

    def test_parenthesis_token_rejected(self, builder, helpers):
        """Test parenthesis tokens are treated as a contract violation."""
        with pytest.raises(IntCalcMalformedExpressionError, match="Unexpected parenthesis"):
            builder.build(helpers.tokens(1, "(", 2, "+"))
