"""AST evaluator.

Walks the tree post-order with an explicit stack instead of recursion, so a
long chain such as ``1+1+...+1`` is limited by memory rather than by the
interpreter's recursion limit.
"""

from __future__ import annotations

import math
import operator

from .nodes import BinaryOp, Negate, Node, Number, Operator
from .types import EvalError

_BIN_OPS = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
}


def _apply(op: Operator, left: float, right: float) -> float:
    if op is Operator.DIV and right == 0.0:
        raise EvalError("Division by zero")
    result = _BIN_OPS[op](left, right)
    if not math.isfinite(result):
        raise EvalError(f"Result of '{op.value}' is out of range", "OVERFLOW")
    return result


def evaluate(node: Node) -> float:
    """Reduce ``node`` to a float. The tree is never modified.

    Raises:
        EvalError: division whose right operand is exactly zero, or an
            intermediate result outside the float64 range
    """
    values: list[float] = []
    # (node, children_done)
    pending: list[tuple[Node, bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if isinstance(current, Number):
            value = float(current.value)
            if not math.isfinite(value):
                raise EvalError(f"Number {value} is out of range", "OVERFLOW")
            values.append(value)
        elif isinstance(current, Negate):
            if children_done:
                values.append(-values.pop())
            else:
                pending.append((current, True))
                pending.append((current.operand, False))
        elif isinstance(current, BinaryOp):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply(current.op, left, right))
            else:
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
        else:
            raise TypeError(f"Unsupported node: {type(current).__name__}")
    return values.pop()
