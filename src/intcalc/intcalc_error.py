"""Exception classes for intcalc with detailed context."""

from typing import Optional, Tuple


class IntCalcError(Exception):
    """
    Base exception for intcalc errors.

    Besides the core message, an error may carry optional details that help the user
    correct their input. Each detail that is present is rendered on its own
    "Label: value" line after the message, in the order of `DETAIL_LABELS`.
    """

    DETAIL_LABELS: Tuple[Tuple[str, str], ...] = (
        ("position", "Position"),
        ("received", "Received"),
        ("expected", "Expected"),
        ("context", "Context"),
        ("suggestion", "Suggestion"),
        ("example", "Example"),
    )

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        context: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None
    ):
        """
        Args:
            message: Core error description
            position: Character position in the expression, where one applies
            received: What was found
            expected: What should have been found
            context: Background on the rule that was broken
            suggestion: How to fix the input
            example: Correct (and incorrect) usage
        """
        self.message = message
        self.position = position
        self.received = received
        self.expected = expected
        self.context = context
        self.suggestion = suggestion
        self.example = example

        lines = [f"Error: {message}"]
        for attribute, label in self.DETAIL_LABELS:
            value = getattr(self, attribute)
            if value is not None and value != "":
                lines.append(f"{label}: {value}")

        super().__init__("\n".join(lines))


class IntCalcUsageError(IntCalcError):
    """No expression was supplied to evaluate."""


class IntCalcParseError(IntCalcError):
    """Structural errors found while converting or building an expression."""


class IntCalcParenthesisMismatchError(IntCalcParseError):
    """Unbalanced parentheses."""


class IntCalcMalformedExpressionError(IntCalcParseError):
    """A postfix sequence that cannot be built into a single expression tree."""


class IntCalcEvalError(IntCalcError):
    """Evaluation errors with detailed context."""


class IntCalcDivisionByZeroError(IntCalcEvalError):
    """A divisor evaluated to zero."""
