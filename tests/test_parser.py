"""Unit tests for parser module."""

import unittest

from calculadora_pkg.lexer import TokenKind, tokenize
from calculadora_pkg.nodes import BinaryOp, Negate, Number, Operator, to_infix
from calculadora_pkg.parser import Parser, parse
from calculadora_pkg.types import ParseError


def parse_text(text):
    return parse(tokenize(text))


class TestPrecedence(unittest.TestCase):
    """Test operator precedence and associativity."""

    def test_multiplication_binds_tighter(self):
        self.assertEqual(
            parse_text("2 + 3 * 4"),
            BinaryOp(
                Operator.ADD,
                Number(2.0),
                BinaryOp(Operator.MUL, Number(3.0), Number(4.0)),
            ),
        )

    def test_left_associative_subtraction(self):
        self.assertEqual(to_infix(parse_text("10 - 2 - 3")), "((10 - 2) - 3)")

    def test_left_associative_division(self):
        self.assertEqual(to_infix(parse_text("8 / 4 / 2")), "((8 / 4) / 2)")

    def test_mixed_levels(self):
        self.assertEqual(
            to_infix(parse_text("1 - 2 * 3 + 4 / 5")),
            "((1 - (2 * 3)) + (4 / 5))",
        )

    def test_parentheses_override_precedence(self):
        self.assertEqual(to_infix(parse_text("(2 + 3) * 4")), "((2 + 3) * 4)")

    def test_single_number(self):
        self.assertEqual(parse_text("42"), Number(42.0))

    def test_redundant_parentheses(self):
        self.assertEqual(parse_text("((7))"), Number(7.0))


class TestUnaryMinus(unittest.TestCase):
    """Test unary negation nodes."""

    def test_unary_binds_tighter_than_multiplication(self):
        self.assertEqual(
            parse_text("-2 * 3"),
            BinaryOp(Operator.MUL, Negate(Number(2.0)), Number(3.0)),
        )

    def test_stacked_unary(self):
        self.assertEqual(parse_text("--5"), Negate(Negate(Number(5.0))))

    def test_unary_on_parenthesized(self):
        self.assertEqual(to_infix(parse_text("-(1 + 2)")), "-(1 + 2)")

    def test_unary_after_binary_operator(self):
        self.assertEqual(to_infix(parse_text("5 - -3")), "(5 - -3)")


class TestParseErrors(unittest.TestCase):
    """Test structural errors."""

    def assertParseError(self, text, code, position=None):
        with self.assertRaises(ParseError) as ctx:
            parse_text(text)
        self.assertEqual(ctx.exception.code, code)
        if position is not None:
            self.assertEqual(ctx.exception.position, position)
        return ctx.exception

    def test_empty_input(self):
        self.assertParseError("", "UNEXPECTED_END")
        self.assertParseError("   ", "UNEXPECTED_END")

    def test_trailing_operator(self):
        self.assertParseError("5 + ", "UNEXPECTED_END")
        self.assertParseError("5 *", "UNEXPECTED_END")

    def test_consecutive_binary_operators(self):
        err = self.assertParseError("5 + * 3", "UNEXPECTED_TOKEN", 4)
        self.assertEqual(err.token.kind, TokenKind.MULTIPLY)

    def test_leading_plus(self):
        self.assertParseError("+5", "UNEXPECTED_TOKEN", 0)

    def test_missing_closing_parenthesis(self):
        self.assertParseError("(2 + 3", "UNMATCHED_PARENTHESIS", 0)
        self.assertParseError("1 + ((2) * 3", "UNMATCHED_PARENTHESIS", 4)

    def test_extra_closing_parenthesis(self):
        self.assertParseError("2 + 3)", "UNEXPECTED_TOKEN", 5)

    def test_leftover_tokens(self):
        self.assertParseError("(2 3)", "UNEXPECTED_TOKEN", 3)
        self.assertParseError("2 (3)", "UNEXPECTED_TOKEN", 2)

    def test_empty_parentheses(self):
        self.assertParseError("()", "UNEXPECTED_TOKEN", 1)

    def test_division_by_zero_is_not_a_parse_error(self):
        self.assertEqual(
            parse_text("5 / 0"), BinaryOp(Operator.DIV, Number(5.0), Number(0.0))
        )


class TestNestingDepth(unittest.TestCase):
    """Test the recursion guard."""

    def test_depth_at_limit(self):
        from calculadora_pkg.config import MAX_EXPRESSION_DEPTH

        text = "(" * MAX_EXPRESSION_DEPTH + "1" + ")" * MAX_EXPRESSION_DEPTH
        self.assertEqual(parse_text(text), Number(1.0))

    def test_too_deep_parentheses(self):
        from calculadora_pkg.config import MAX_EXPRESSION_DEPTH

        depth = MAX_EXPRESSION_DEPTH + 1
        with self.assertRaises(ParseError) as ctx:
            parse_text("(" * depth + "1" + ")" * depth)
        self.assertEqual(ctx.exception.code, "TOO_DEEP")

    def test_too_deep_unary_chain(self):
        with self.assertRaises(ParseError) as ctx:
            Parser(tokenize("---1"), max_depth=2).parse()
        self.assertEqual(ctx.exception.code, "TOO_DEEP")
        self.assertEqual(ctx.exception.position, 2)

    def test_long_flat_chain_is_not_nesting(self):
        tree = Parser(tokenize("+".join(["1"] * 500)), max_depth=1).parse()
        self.assertIsInstance(tree, BinaryOp)


if __name__ == "__main__":
    unittest.main()
