"""Recursive-descent parser building an AST from a token list.

Grammar, lowest to highest precedence::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := UNARY_MINUS factor | primary
    primary    := NUMBER | '(' expression ')'

Binary operators of equal precedence fold into a left-leaning chain, which
makes them left-associative.
"""

from __future__ import annotations

from . import config
from .lexer import Token, TokenKind
from .nodes import BinaryOp, Negate, Node, Number, Operator
from .types import ParseError

_ADDITIVE = {TokenKind.PLUS: Operator.ADD, TokenKind.MINUS: Operator.SUB}
_MULTIPLICATIVE = {TokenKind.MULTIPLY: Operator.MUL, TokenKind.DIVIDE: Operator.DIV}


class Parser:
    """Consumes tokens through a single forward cursor; no backtracking."""

    def __init__(self, tokens: list[Token], max_depth: int | None = None):
        self.tokens = tokens
        self.position = 0
        self.max_depth = config.MAX_EXPRESSION_DEPTH if max_depth is None else max_depth
        self._depth = 0

    def peek(self) -> Token | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self.position += 1
        return token

    def parse(self) -> Node:
        """Parse the whole token list into a single expression tree."""
        try:
            node = self.parse_expression()
        except RecursionError:
            raise ParseError("Expression nested too deeply", "TOO_DEEP") from None
        leftover = self.peek()
        if leftover is not None:
            raise _unexpected(leftover)
        return node

    def parse_expression(self) -> Node:
        node = self.parse_term()
        while True:
            token = self.peek()
            if token is None or token.kind not in _ADDITIVE:
                return node
            self.advance()
            node = BinaryOp(_ADDITIVE[token.kind], node, self.parse_term())

    def parse_term(self) -> Node:
        node = self.parse_factor()
        while True:
            token = self.peek()
            if token is None or token.kind not in _MULTIPLICATIVE:
                return node
            self.advance()
            node = BinaryOp(_MULTIPLICATIVE[token.kind], node, self.parse_factor())

    def parse_factor(self) -> Node:
        token = self.advance()
        if token is None:
            raise ParseError(
                "Unexpected end of input: expected a number or '('",
                "UNEXPECTED_END",
            )
        if token.kind is TokenKind.NUMBER:
            return Number(token.value)
        if token.kind is TokenKind.UNARY_MINUS:
            self._enter(token)
            operand = self.parse_factor()
            self._depth -= 1
            return Negate(operand)
        if token.kind is TokenKind.LPAREN:
            self._enter(token)
            node = self.parse_expression()
            closing = self.advance()
            if closing is None:
                raise ParseError(
                    f"Unmatched parenthesis opened at position {token.position}",
                    "UNMATCHED_PARENTHESIS",
                    token.position,
                    token,
                )
            if closing.kind is not TokenKind.RPAREN:
                raise _unexpected(closing)
            self._depth -= 1
            return node
        raise _unexpected(token)

    def _enter(self, token: Token) -> None:
        self._depth += 1
        if self._depth > self.max_depth:
            raise ParseError(
                f"Expression nested too deeply (max depth {self.max_depth})",
                "TOO_DEEP",
                token.position,
                token,
            )


def _unexpected(token: Token) -> ParseError:
    return ParseError(
        f"Unexpected token {token.describe()} at position {token.position}",
        "UNEXPECTED_TOKEN",
        token.position,
        token,
    )


def parse(tokens: list[Token]) -> Node:
    """Build the AST for ``tokens``.

    Raises:
        ParseError: the tokens do not form exactly one expression
    """
    return Parser(tokens).parse()
