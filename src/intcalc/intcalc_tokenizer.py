"""Tokenizer for intcalc expressions."""

import logging
from typing import List, Tuple

from intcalc.intcalc_token import IntCalcOperator, IntCalcToken


class IntCalcTokenizer:
    """
    Tokenizes intcalc expressions into tokens.

    Tokenizing never fails. Whitespace and any character that is not a digit, an
    operator or a parenthesis is skipped, leaving later stages to reject input that
    does not form a valid expression.
    """

    OPERATOR_CHARS = "+-*/"
    DIGIT_CHUNK_SIZE = 1000

    def __init__(self) -> None:
        self._logger = logging.getLogger("IntCalcTokenizer")

    def tokenize(self, expression: str) -> List[IntCalcToken]:
        """
        Tokenize an intcalc expression.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens in source order
        """
        tokens: List[IntCalcToken] = []
        i = 0

        while i < len(expression):
            ch = expression[i]

            if self._is_digit(ch):
                value, length = self._read_integer(expression, i)
                tokens.append(IntCalcToken.integer(value, i, length))
                i += length
                continue

            if ch in self.OPERATOR_CHARS:
                tokens.append(IntCalcToken.operator(IntCalcOperator.from_symbol(ch), i))
                i += 1
                continue

            if ch == '(':
                tokens.append(IntCalcToken.lparen(i))
                i += 1
                continue

            if ch == ')':
                tokens.append(IntCalcToken.rparen(i))
                i += 1
                continue

            if not ch.isspace():
                self._logger.debug("skipping unrecognized character %r at position %d", ch, i)

            i += 1

        self._logger.debug("tokenized %d characters into %d tokens", len(expression), len(tokens))
        return tokens

    def _is_digit(self, ch: str) -> bool:
        # ASCII only: str.isdigit() also accepts characters such as superscripts
        return '0' <= ch <= '9'

    def _read_integer(self, expression: str, start: int) -> Tuple[int, int]:
        """
        Read a run of decimal digits.

        Args:
            expression: The expression being tokenized
            start: Position of the first digit

        Returns:
            Tuple of (integer value, number of characters consumed)
        """
        end = start
        while end < len(expression) and self._is_digit(expression[end]):
            end += 1

        # int() refuses very long digit strings, so convert in bounded chunks
        value = 0
        for chunk_start in range(start, end, self.DIGIT_CHUNK_SIZE):
            chunk = expression[chunk_start:min(chunk_start + self.DIGIT_CHUNK_SIZE, end)]
            value = value * 10 ** len(chunk) + int(chunk)

        return value, end - start
