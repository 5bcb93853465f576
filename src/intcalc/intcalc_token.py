"""Token types and token representation for intcalc expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


def describe_integer(value: int) -> str:
    """
    Render an integer for logs and error messages.

    Integers too long for Python's string conversion limit are summarised by size
    rather than raising.
    """
    try:
        return str(value)

    except ValueError:
        return f"<integer of {value.bit_length()} bits>"


class IntCalcTokenType(Enum):
    """Token types for intcalc expressions."""
    INTEGER = "INTEGER"
    OPERATOR = "OPERATOR"
    LPAREN = "("
    RPAREN = ")"


class IntCalcOperatorKind(Enum):
    """The four binary arithmetic operators, keyed by their source symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True)
class IntCalcOperator:
    """
    A binary operator with its precedence and associativity.

    Precedence and associativity are fixed per kind, so instances should be obtained
    via `from_kind` or `from_symbol` rather than constructed directly.
    """
    kind: IntCalcOperatorKind
    precedence: int
    is_left_associative: bool

    @classmethod
    def from_kind(cls, kind: IntCalcOperatorKind) -> "IntCalcOperator":
        """
        Look up the operator for a given kind.

        Args:
            kind: The operator kind

        Returns:
            The operator with the precedence and associativity for that kind
        """
        return _OPERATORS[kind]

    @classmethod
    def from_symbol(cls, symbol: str) -> "IntCalcOperator":
        """
        Look up the operator for a source symbol.

        Args:
            symbol: One of "+", "-", "*" or "/"

        Returns:
            The matching operator

        Raises:
            ValueError: If the symbol is not an operator
        """
        return _OPERATORS[IntCalcOperatorKind(symbol)]

    @property
    def symbol(self) -> str:
        """The source symbol for this operator."""
        return self.kind.value

    def describe(self) -> str:
        return self.symbol


_OPERATORS: Dict[IntCalcOperatorKind, IntCalcOperator] = {
    IntCalcOperatorKind.ADD: IntCalcOperator(IntCalcOperatorKind.ADD, 2, True),
    IntCalcOperatorKind.SUBTRACT: IntCalcOperator(IntCalcOperatorKind.SUBTRACT, 2, True),
    IntCalcOperatorKind.MULTIPLY: IntCalcOperator(IntCalcOperatorKind.MULTIPLY, 3, True),
    IntCalcOperatorKind.DIVIDE: IntCalcOperator(IntCalcOperatorKind.DIVIDE, 3, True),
}


@dataclass(frozen=True)
class IntCalcToken:
    """
    Represents a single token in an intcalc expression.

    Source position metadata is excluded from comparisons, so the same expression
    written with different spacing produces equal token lists.
    """
    type: IntCalcTokenType
    value: Union[int, IntCalcOperator, str]
    position: int = field(default=0, compare=False)
    length: int = field(default=1, compare=False)

    @classmethod
    def integer(cls, value: int, position: int = 0, length: int = 1) -> "IntCalcToken":
        """Create an integer token."""
        return cls(IntCalcTokenType.INTEGER, value, position, length)

    @classmethod
    def operator(cls, op: IntCalcOperator, position: int = 0) -> "IntCalcToken":
        """Create an operator token."""
        return cls(IntCalcTokenType.OPERATOR, op, position)

    @classmethod
    def lparen(cls, position: int = 0) -> "IntCalcToken":
        """Create a left parenthesis token."""
        return cls(IntCalcTokenType.LPAREN, "(", position)

    @classmethod
    def rparen(cls, position: int = 0) -> "IntCalcToken":
        """Create a right parenthesis token."""
        return cls(IntCalcTokenType.RPAREN, ")", position)

    def is_operator(self) -> bool:
        return self.type == IntCalcTokenType.OPERATOR

    def describe(self, brief: bool = False) -> str:
        """
        Render the token as it would appear in source text.

        Args:
            brief: Summarise integers too long to convert to text instead of raising
        """
        if isinstance(self.value, IntCalcOperator):
            return self.value.describe()

        if brief and isinstance(self.value, int):
            return describe_integer(self.value)

        return str(self.value)

    def __repr__(self) -> str:
        return f"IntCalcToken({self.type.name}, {self.describe(brief=True)}, pos={self.position})"
