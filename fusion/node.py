from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from fusion.token import Token


class UnaryOperator(IntEnum):
    Neg = 1


class BinaryOperator(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Div = 4


UNARY_SYMBOLS = {UnaryOperator.Neg: "-"}

BINARY_SYMBOLS = {
    BinaryOperator.Add: "+",
    BinaryOperator.Sub: "-",
    BinaryOperator.Mul: "*",
    BinaryOperator.Div: "/",
}


@dataclass(frozen=True)
class NumberLiteral:
    value: float
    location: int = field(default=0, compare=False)


@dataclass(frozen=True)
class UnaryOp:
    op: UnaryOperator
    operand: "Expression"
    location: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator
    left: "Expression"
    right: "Expression"
    location: int = field(default=0, compare=False)


Expression = Union[NumberLiteral, UnaryOp, BinaryOp]


def new_number(token: Token) -> NumberLiteral:
    return NumberLiteral(token.value, token.location)


def new_unary(op: UnaryOperator, operand: Expression, token: Token) -> UnaryOp:
    return UnaryOp(op, operand, token.location)


def new_binary(
    op: BinaryOperator, left: Expression, right: Expression, token: Token
) -> BinaryOp:
    return BinaryOp(op, left, right, token.location)


def dump_tree(node: Expression) -> str:
    """Render the tree one node per line, children indented below parents."""
    lines = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        indent = "  " * depth
        match current:
            case NumberLiteral(value=value):
                lines.append(f"{indent}Number {value!r}")
            case UnaryOp(op=op, operand=operand):
                lines.append(f"{indent}Unary {UNARY_SYMBOLS[op]}")
                stack.append((operand, depth + 1))
            case BinaryOp(op=op, left=left, right=right):
                lines.append(f"{indent}Binary {BINARY_SYMBOLS[op]}")
                stack.append((right, depth + 1))
                stack.append((left, depth + 1))
            case _:
                raise TypeError(f"invalid node {current!r}")
    return "\n".join(lines)
