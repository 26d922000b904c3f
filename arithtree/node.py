from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from arithtree.helper import int_to_digits
from arithtree.token import TokenKind

INDENT = "  "


class BinaryOperator(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Div = 4

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self]

    @classmethod
    def from_token_kind(cls, kind: TokenKind) -> "BinaryOperator":
        return TOKEN_OPERATORS[kind]


OPERATOR_SYMBOLS = {
    BinaryOperator.Add: "+",
    BinaryOperator.Sub: "-",
    BinaryOperator.Mul: "*",
    BinaryOperator.Div: "/",
}

TOKEN_OPERATORS = {
    TokenKind.Plus: BinaryOperator.Add,
    TokenKind.Minus: BinaryOperator.Sub,
    TokenKind.Multiply: BinaryOperator.Mul,
    TokenKind.Divide: BinaryOperator.Div,
}


@dataclass(frozen=True)
class NumberNode:
    value: int


@dataclass(frozen=True)
class BinaryOpNode:
    operator: BinaryOperator
    left: "Node"
    right: "Node"


Node = Union[NumberNode, BinaryOpNode]


def new_number(value: int) -> NumberNode:
    return NumberNode(value)


def new_binary(kind: TokenKind, left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(BinaryOperator.from_token_kind(kind), left, right)


def render(node: Node, indent: int = 0) -> str:
    """Render ``node`` as an indented tree, one node per line."""
    result = []
    stack = [(node, indent)]
    while stack:
        current, depth = stack.pop()
        prefix = INDENT * depth
        match current:
            case NumberNode(value=value):
                result.append(f"{prefix}Number: {int_to_digits(value)}\n")
            case BinaryOpNode(operator=operator, left=left, right=right):
                result.append(f"{prefix}BinaryOp: {operator.symbol}\n")
                stack.append((right, depth + 1))
                stack.append((left, depth + 1))
            case _:
                raise TypeError(f"invalid node: {current!r}")
    return "".join(result)
