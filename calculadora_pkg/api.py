"""Public API for Calculadora.

``evaluate_expression`` is the core entry point and raises on failure.
``evaluate`` and ``validate_expression`` return structured values instead,
for callers that only want something to display.
"""

from __future__ import annotations

from typing import Any

from . import config
from .evaluator import evaluate as evaluate_ast
from .lexer import tokenize
from .logging_config import get_logger
from .parser import parse
from .types import EvalResult, EvaluationError

logger = get_logger("api")


def evaluate_expression(text: str) -> float:
    """Tokenize, parse and evaluate ``text``.

    Args:
        text: Arithmetic expression (e.g., "2 + 3 * 4", "-(1.5 - 4) / 2")

    Returns:
        The value as a float

    Raises:
        EvaluationError: the first ValidationError, LexError, ParseError or
            EvalError met along the pipeline

    Example:
        >>> from calculadora_pkg.api import evaluate_expression
        >>> evaluate_expression("2 + 3 * 4")
        14.0
        >>> evaluate_expression("10 - 2 - 3")
        5.0
    """
    return evaluate_ast(parse(tokenize(text)))


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    value = float(val)
    if value == 0.0:
        value = 0.0  # drop the sign of -0.0
    fmt = "{:." + str(int(precision)) + "g}"
    return fmt.format(value)


def evaluate(text: str) -> EvalResult:
    """Evaluate ``text`` without raising for bad input.

    Returns:
        EvalResult with the value and its formatted form, or the error
        message, code and position

    Example:
        >>> from calculadora_pkg.api import evaluate
        >>> evaluate("(2 + 3) * 4").result
        '20'
        >>> evaluate("5 / 0").error_code
        'DIVISION_BY_ZERO'
    """
    try:
        value = evaluate_expression(text)
    except EvaluationError as e:
        logger.debug(
            "Evaluation of %r failed: %s", text, e, extra={"error_code": e.code}
        )
        return EvalResult(
            ok=False, error=str(e), error_code=e.code, position=e.position
        )
    if value == 0.0:
        value = 0.0  # drop the sign of -0.0, matching format_number
    return EvalResult(ok=True, value=value, result=format_number(value))


def validate_expression(text: str) -> tuple[bool, str | None]:
    """Check that ``text`` lexes and parses, without evaluating it.

    Division by zero is not detected here since it only shows up during
    evaluation.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from calculadora_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("5 $ 3")
        (False, "Unexpected character '$' at position 2")
    """
    try:
        parse(tokenize(text))
    except EvaluationError as e:
        return False, str(e)
    return True, None
