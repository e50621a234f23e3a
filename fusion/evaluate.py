from typing import Optional

from fusion.errors import DivisionByZero
from fusion.node import (
    BinaryOp,
    BinaryOperator,
    Expression,
    NumberLiteral,
    UnaryOp,
    UnaryOperator,
)


def apply_unary(op: UnaryOperator, value: float) -> float:
    match op:
        case UnaryOperator.Neg:
            return -value
    raise ValueError("invalid unary operator")


def apply_binary(
    op: BinaryOperator, left: float, right: float, location: Optional[int] = None
) -> float:
    match op:
        case BinaryOperator.Add:
            return left + right
        case BinaryOperator.Sub:
            return left - right
        case BinaryOperator.Mul:
            return left * right
        case BinaryOperator.Div:
            if right == 0:
                raise DivisionByZero(location)
            return left / right
    raise ValueError("invalid binary operator")


def evaluate(node: Expression) -> float:
    """Evaluate a tree bottom-up.

    Post-order walk driven by an explicit stack: a node is pushed once to
    schedule its children and once more to combine their values, so
    left-leaning chains like ``1+1+...+1`` do not grow the call stack.
    """
    values: list[float] = []
    stack: list[tuple[Expression, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        match current:
            case NumberLiteral(value=value):
                values.append(value)
            case UnaryOp(operand=operand) if not expanded:
                stack.append((current, True))
                stack.append((operand, False))
            case UnaryOp(op=op):
                values.append(apply_unary(op, values.pop()))
            case BinaryOp(left=left, right=right) if not expanded:
                stack.append((current, True))
                stack.append((right, False))
                stack.append((left, False))
            case BinaryOp(op=op, location=location):
                right = values.pop()
                left = values.pop()
                values.append(apply_binary(op, left, right, location))
            case _:
                raise TypeError(f"invalid node {current!r}")
    return values.pop()
