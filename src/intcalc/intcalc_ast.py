"""intcalc expression tree node types.

Nodes are immutable and hold no traversal logic. Traversals such as evaluation or
formatting are written as `IntCalcASTVisitor` subclasses, so new ones can be added
without changing these classes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Type

from intcalc.intcalc_token import IntCalcOperator, IntCalcOperatorKind, describe_integer


@dataclass(frozen=True)
class IntCalcASTNode(ABC):
    """Base class for all intcalc expression tree nodes."""

    @abstractmethod
    def describe(self) -> str:
        """Describe the node for logs and error messages."""


@dataclass(frozen=True)
class IntCalcASTInteger(IntCalcASTNode):
    """An integer literal leaf."""
    value: int

    def describe(self) -> str:
        return describe_integer(self.value)


@dataclass(frozen=True)
class IntCalcASTBinary(IntCalcASTNode):
    """Base class for nodes applying a binary operator to two child expressions."""
    left: IntCalcASTNode
    right: IntCalcASTNode

    kind: ClassVar[IntCalcOperatorKind]

    @property
    def operator(self) -> IntCalcOperator:
        return IntCalcOperator.from_kind(self.kind)

    def describe(self) -> str:
        return f"{self.__class__.__name__}({self.left.describe()}, {self.right.describe()})"


@dataclass(frozen=True)
class IntCalcASTAdd(IntCalcASTBinary):
    """left + right"""
    kind: ClassVar[IntCalcOperatorKind] = IntCalcOperatorKind.ADD


@dataclass(frozen=True)
class IntCalcASTSubtract(IntCalcASTBinary):
    """left - right"""
    kind: ClassVar[IntCalcOperatorKind] = IntCalcOperatorKind.SUBTRACT


@dataclass(frozen=True)
class IntCalcASTMultiply(IntCalcASTBinary):
    """left * right"""
    kind: ClassVar[IntCalcOperatorKind] = IntCalcOperatorKind.MULTIPLY


@dataclass(frozen=True)
class IntCalcASTDivide(IntCalcASTBinary):
    """left / right, truncating toward zero"""
    kind: ClassVar[IntCalcOperatorKind] = IntCalcOperatorKind.DIVIDE


BINARY_NODE_TYPES: Dict[IntCalcOperatorKind, Type[IntCalcASTBinary]] = {
    IntCalcOperatorKind.ADD: IntCalcASTAdd,
    IntCalcOperatorKind.SUBTRACT: IntCalcASTSubtract,
    IntCalcOperatorKind.MULTIPLY: IntCalcASTMultiply,
    IntCalcOperatorKind.DIVIDE: IntCalcASTDivide,
}
