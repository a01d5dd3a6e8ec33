"""Lexical analysis: turns expression text into a list of tokens.

A ``-`` becomes ``UNARY_MINUS`` whenever a value is expected (start of input,
after an operator, after ``(``) and the binary ``MINUS`` otherwise, so the
parser never has to look backwards.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from . import config
from .types import LexError, ValidationError


class TokenKind(Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    UNARY_MINUS = "unary -"
    MULTIPLY = "*"
    DIVIDE = "/"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class Token:
    """A lexical unit and the character offset where it starts."""

    kind: TokenKind
    position: int
    value: float | None = None

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value:g}"
        return f"'{self.kind.value}'"


_SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_DIGITS = frozenset("0123456789")
NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def _abbreviate(numeral: str, limit: int = 20) -> str:
    if len(numeral) <= limit:
        return numeral
    return f"{numeral[:limit]}..."


def _scan_numeral(text: str, start: int) -> tuple[float, int]:
    """Read the digit/dot run beginning at ``start``. Returns (value, end)."""
    end = start
    while end < len(text) and (text[end] in _DIGITS or text[end] == "."):
        end += 1
    numeral = text[start:end]
    if not NUMBER_RE.fullmatch(numeral):
        raise LexError(
            f"Invalid number '{numeral}' at position {start}",
            "INVALID_NUMBER",
            start,
            numeral[0],
        )
    value = float(numeral)
    # float64 overflow gives inf; a non-zero numeral that underflows gives 0.0
    if not math.isfinite(value) or (value == 0.0 and numeral.strip("0.")):
        raise LexError(
            f"Number '{_abbreviate(numeral)}' at position {start} is out of range",
            "NUMBER_OUT_OF_RANGE",
            start,
            numeral[0],
        )
    return value, end


def tokenize(text: str) -> list[Token]:
    """Convert ``text`` into tokens.

    Raises:
        ValidationError: input longer than ``config.MAX_INPUT_LENGTH``
        LexError: unsupported character or malformed numeral
    """
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )

    tokens: list[Token] = []
    expect_value = True
    i = 0
    while i < len(text):
        char = text[i]
        if char.isspace():
            i += 1
            continue
        if char in _DIGITS or char == ".":
            value, end = _scan_numeral(text, i)
            tokens.append(Token(TokenKind.NUMBER, i, value))
            expect_value = False
            i = end
            continue
        if char == "-":
            kind = TokenKind.UNARY_MINUS if expect_value else TokenKind.MINUS
            tokens.append(Token(kind, i))
            expect_value = True
        elif char in _SINGLE_CHAR_TOKENS:
            kind = _SINGLE_CHAR_TOKENS[char]
            tokens.append(Token(kind, i))
            expect_value = kind is not TokenKind.RPAREN
        else:
            raise LexError(
                f"Unexpected character '{char}' at position {i}",
                "UNEXPECTED_CHARACTER",
                i,
                char,
            )
        i += 1
    return tokens
