from itertools import product

import pytest

from bignumcalc.operations import (
    DivisionByZero,
    add_signed,
    divide_signed,
    evaluate,
    multiply_signed,
    subtract_signed,
)
from bignumcalc.validation import Expression, InvalidArguments

PAIRS = [
    ("0", "0"),
    ("7", "5"),
    ("5", "7"),
    ("12", "12"),
    ("999", "1"),
    ("1", "999"),
    ("100", "99"),
    ("4096", "256"),
    ("123456789012345678901234567890", "987654321"),
]

SIGNS = list(product(("", "-"), repeat=2))

SIGNED = [
    (s1 + a, s2 + b) for (a, b) in PAIRS for (s1, s2) in SIGNS
]

DIVISION_PAIRS = [
    ("0", "3"),
    ("7", "5"),
    ("5", "7"),
    ("12", "12"),
    ("999", "1"),
    ("1000", "7"),
    ("987654321987654321987", "123456789123456789"),
]

SIGNED_DIVISION = [
    (s1 + a, s2 + b) for (a, b) in DIVISION_PAIRS for (s1, s2) in SIGNS
]


@pytest.mark.parametrize("num1, num2", SIGNED)
def test_add_signed_matches_integer_sum(num1, num2):
    assert int(add_signed(num1, num2)) == int(num1) + int(num2)


@pytest.mark.parametrize("num1, num2", SIGNED)
def test_subtract_signed_matches_integer_difference(num1, num2):
    assert int(subtract_signed(num1, num2)) == int(num1) - int(num2)


@pytest.mark.parametrize("num1, num2", SIGNED)
def test_subtract_signed_has_no_leading_zeros(num1, num2):
    magnitude = subtract_signed(num1, num2).lstrip("-")
    assert magnitude == "0" or not magnitude.startswith("0")


@pytest.mark.parametrize("num1, num2", SIGNED)
def test_multiply_signed_matches_integer_product(num1, num2):
    assert int(multiply_signed(num1, num2)) == int(num1) * int(num2)


@pytest.mark.parametrize("num1, num2", SIGNED)
def test_multiply_sign_follows_operand_signs(num1, num2):
    negative = num1.startswith("-") != num2.startswith("-")
    assert multiply_signed(num1, num2).startswith("-") == negative


@pytest.mark.parametrize("num1, num2", SIGNED_DIVISION)
def test_divide_signed_truncates_toward_zero(num1, num2):
    x, y = int(num1), int(num2)
    quotient = abs(x) // abs(y)
    expected = -quotient if (x < 0) != (y < 0) else quotient
    assert int(divide_signed(num1, num2)) == expected


def test_add_keeps_schoolbook_leading_zeros():
    assert add_signed("100", "-99") == "001"


def test_multiply_by_zero_keeps_column_layout():
    assert multiply_signed("12", "0") == "00"


def test_divide_equal_magnitudes_opposite_signs():
    assert divide_signed("-7", "7") == "-1"


@pytest.mark.parametrize("divisor", ["0", "-0", "000"])
def test_divide_by_zero_raises(divisor):
    with pytest.raises(DivisionByZero):
        divide_signed("5", divisor)


def test_division_by_zero_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        divide_signed("-12", "0")


def test_empty_magnitude_is_rejected():
    with pytest.raises(ValueError):
        add_signed("-", "5")


def test_non_digit_operand_is_rejected():
    with pytest.raises(ValueError):
        multiply_signed("1a", "2")


@pytest.mark.parametrize(
    "operator, expected",
    [("+", 6 + -7), ("-", 6 - -7), ("x", 6 * -7), ("/", 0)],
)
def test_evaluate_dispatches_on_operator(operator, expected):
    assert int(evaluate(Expression("6", operator, "-7"))) == expected


def test_evaluate_rejects_modulo():
    with pytest.raises(InvalidArguments):
        evaluate(Expression("6", "%", "4"))