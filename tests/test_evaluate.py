"""Tests for the tree evaluator."""

import pytest

from fusion.errors import DivisionByZero, EvalError
from fusion.evaluate import apply_binary, evaluate
from fusion.node import BinaryOp, BinaryOperator, NumberLiteral, UnaryOp, UnaryOperator


def test_number_literal():
    assert evaluate(NumberLiteral(4.5)) == 4.5


def test_negation():
    assert evaluate(UnaryOp(UnaryOperator.Neg, NumberLiteral(3.0))) == -3.0


@pytest.mark.parametrize(
    "op, expected",
    [
        (BinaryOperator.Add, 8.0),
        (BinaryOperator.Sub, 4.0),
        (BinaryOperator.Mul, 12.0),
        (BinaryOperator.Div, 3.0),
    ],
)
def test_binary_operators(op, expected):
    tree = BinaryOp(op, NumberLiteral(6.0), NumberLiteral(2.0))
    assert evaluate(tree) == expected


def test_left_operand_is_evaluated_first():
    tree = BinaryOp(
        BinaryOperator.Sub,
        BinaryOp(BinaryOperator.Div, NumberLiteral(8.0), NumberLiteral(4.0)),
        UnaryOp(UnaryOperator.Neg, NumberLiteral(1.0)),
    )
    assert evaluate(tree) == 3.0


def test_division_by_zero_carries_operator_location():
    tree = BinaryOp(
        BinaryOperator.Div, NumberLiteral(1.0), NumberLiteral(0.0), location=7
    )
    with pytest.raises(DivisionByZero) as exc_info:
        evaluate(tree)
    assert exc_info.value.location == 7
    assert exc_info.value.code == "DIVISION_BY_ZERO"
    assert isinstance(exc_info.value, EvalError)


def test_division_by_negative_zero():
    tree = BinaryOp(
        BinaryOperator.Div,
        NumberLiteral(1.0),
        UnaryOp(UnaryOperator.Neg, NumberLiteral(0.0)),
    )
    with pytest.raises(DivisionByZero):
        evaluate(tree)


def test_zero_numerator_is_fine():
    assert apply_binary(BinaryOperator.Div, 0.0, 5.0) == 0.0


def test_deep_left_chain_does_not_recurse():
    tree = NumberLiteral(0.0)
    for _ in range(20000):
        tree = BinaryOp(BinaryOperator.Add, tree, NumberLiteral(1.0))
    assert evaluate(tree) == 20000.0


def test_deep_unary_chain_does_not_recurse():
    tree = NumberLiteral(2.0)
    for _ in range(5001):
        tree = UnaryOp(UnaryOperator.Neg, tree)
    assert evaluate(tree) == -2.0
