"""RPN求值器与操作符测试"""

import math

import pytest

from core import (
    InvalidExpressionError, InvalidNumberError, Operators, RPNEvaluator,
    StackUnderflowError, UnmatchedParenthesesError, CalculatorError
)
from core.token_system import Token


def rpn(*texts):
    return [Token.from_text(t) for t in texts]


# --- 基本求值 ---

def test_binary_operand_order():
    assert RPNEvaluator.evaluate(rpn("10", "4", "-")) == pytest.approx(6.0)
    assert RPNEvaluator.evaluate(rpn("1", "4", "/")) == pytest.approx(0.25)
    assert RPNEvaluator.evaluate(rpn("2", "10", "^")) == pytest.approx(1024.0)


def test_negation():
    assert RPNEvaluator.evaluate(rpn("3", "NEG")) == pytest.approx(-3.0)
    assert RPNEvaluator.evaluate(rpn("3", "NEG", "NEG")) == pytest.approx(3.0)


def test_negative_literal():
    assert RPNEvaluator.evaluate(rpn("-2.5")) == pytest.approx(-2.5)


def test_result_is_float():
    assert isinstance(RPNEvaluator.evaluate(rpn("1", "2", "+")), float)


# --- 错误 ---

def test_leftover_open_paren():
    with pytest.raises(UnmatchedParenthesesError):
        RPNEvaluator.evaluate(rpn("1", "2", "+", "("))


def test_open_paren_checked_before_numbers():
    with pytest.raises(UnmatchedParenthesesError):
        RPNEvaluator.evaluate(rpn("1.2.3", "("))


def test_invalid_number_carries_text():
    with pytest.raises(InvalidNumberError) as exc_info:
        RPNEvaluator.evaluate(rpn("1.2.3", "1", "+"))
    assert exc_info.value.text == "1.2.3"
    assert str(exc_info.value) == "invalid number: (1.2.3)"


def test_empty_sequence_is_invalid():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([])


def test_underflow_on_binary_operator():
    with pytest.raises(StackUnderflowError):
        RPNEvaluator.evaluate(rpn("1", "+"))


def test_underflow_on_negation():
    with pytest.raises(StackUnderflowError) as exc_info:
        RPNEvaluator.evaluate(rpn("NEG"))
    assert exc_info.value.token_name == "NEG"


def test_underflow_is_not_a_user_error():
    assert not issubclass(StackUnderflowError, CalculatorError)


# --- 剩余多个值 ---

def test_partial_returns_first_value():
    assert RPNEvaluator.evaluate(rpn("2", "3")) == pytest.approx(2.0)


def test_strict_rejects_leftover_values():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate(rpn("2", "3"), allow_partial=False)


def test_strict_accepts_single_value():
    assert RPNEvaluator.evaluate(rpn("2", "3", "*"), allow_partial=False) == pytest.approx(6.0)


# --- IEEE-754 语义 ---

def test_division_by_zero_is_infinite():
    assert Operators.div(1.0, 0.0) == math.inf
    assert Operators.div(-1.0, 0.0) == -math.inf


def test_zero_over_zero_is_nan():
    assert math.isnan(Operators.div(0.0, 0.0))


def test_power_overflow_is_infinite():
    assert Operators.pow(2.0, 1024.0) == math.inf


def test_negative_base_fractional_exponent_is_nan():
    assert math.isnan(Operators.pow(-8.0, 1.0 / 3.0))


def test_operators_return_builtin_floats():
    for value in (Operators.add(1, 2), Operators.sub(1, 2), Operators.mul(1, 2),
                  Operators.div(1, 2), Operators.pow(1, 2), Operators.neg(1)):
        assert type(value) is float
