"""Abstract syntax tree node types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Negate:
    operand: Node


@dataclass(frozen=True)
class BinaryOp:
    op: Operator
    left: Node
    right: Node


Node = Union[Number, Negate, BinaryOp]


def to_infix(node: Node) -> str:
    """Render a tree fully parenthesized, e.g. ``((2 + 3) * 4)``.

    Handy for inspecting how precedence and associativity were resolved.
    """
    if isinstance(node, Number):
        return f"{node.value:g}"
    if isinstance(node, Negate):
        return f"-{to_infix(node.operand)}"
    return f"({to_infix(node.left)} {node.op.value} {to_infix(node.right)})"
