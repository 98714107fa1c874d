"""中缀转后缀测试"""

import pytest

from core import NEGATION_MARKER, to_postfix, tokenize
from core.converter import is_lower_or_equal_precedence
from core.token_system import Token


def postfix(expression):
    return [t.name for t in to_postfix(tokenize(expression))]


@pytest.mark.parametrize("expression,expected", [
    ("3 + 4 * 2", ["3", "4", "2", "*", "+"]),
    ("3 * 4 + 2", ["3", "4", "*", "2", "+"]),
    ("10 - 4 - 3", ["10", "4", "-", "3", "-"]),
    ("8 / 4 / 2", ["8", "4", "/", "2", "/"]),
    ("(3 + 4) * 2", ["3", "4", "+", "2", "*"]),
    ("2 ^ 3 ^ 2", ["2", "3", "2", "^", "^"]),
    ("5(3/2)", ["5", "3", "2", "/", "*"]),
])
def test_binary_operators(expression, expected):
    assert postfix(expression) == expected


def test_stacked_negation_is_not_popped():
    assert postfix("--(1)") == ["1", NEGATION_MARKER, NEGATION_MARKER]


def test_negation_binds_tighter_than_power():
    assert postfix("-(2)^2") == ["2", NEGATION_MARKER, "2", "^"]


def test_negation_of_power_operand():
    assert postfix("2^-(3)") == ["2", "3", NEGATION_MARKER, "^"]


def test_negation_before_binary_operator():
    assert postfix("-(4) + 1") == ["4", NEGATION_MARKER, "1", "+"]


def test_parentheses_are_not_emitted():
    assert "(" not in postfix("((1 + 2))")
    assert ")" not in postfix("((1 + 2))")


def test_unmatched_open_paren_stays_in_output():
    assert postfix("(1 + 2") == ["1", "2", "+", "("]


def test_unmatched_close_paren_drains_stack():
    assert postfix("1 + 2) * 3") == ["1", "2", "+", "3", "*"]


def test_empty_sequence():
    assert to_postfix([]) == []


@pytest.mark.parametrize("incoming,top,expected", [
    ("+", "*", True),
    ("+", "-", True),
    ("*", "+", False),
    ("^", "^", False),
    ("^", NEGATION_MARKER, True),
    (NEGATION_MARKER, NEGATION_MARKER, False),
    (NEGATION_MARKER, "^", False),
    ("+", "(", False),
    ("(", "+", False),
    (")", "+", False),
])
def test_is_lower_or_equal_precedence(incoming, top, expected):
    assert is_lower_or_equal_precedence(Token.from_text(incoming), Token.from_text(top)) is expected


def test_numbers_never_compare():
    assert is_lower_or_equal_precedence(Token.number("1"), Token.from_text("+")) is False
