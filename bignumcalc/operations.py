"""Signed arithmetic on decimal numerals, built on the unsigned digit routines."""

from __future__ import annotations

from collections.abc import Callable

from .digits import (
    add,
    divide,
    format_digits,
    multiply,
    strip_leading_zeros,
    subtract,
    to_digits,
)
from .validation import (
    Expression,
    InvalidArguments,
    SignCase,
    compare_strings,
    sign_case,
)

_ZERO = "0"
_OPPOSITE_SIGNS = (SignCase.SECOND_NEGATIVE, SignCase.FIRST_NEGATIVE)


class DivisionByZero(ZeroDivisionError):
    """Raised when the divisor of a division is zero."""


def _magnitude(text: str) -> str:
    return text[1:] if text.startswith("-") else text


def _operands(num1: str, num2: str) -> tuple[str, str, list[int], list[int]]:
    """Split off the signs and convert both magnitudes to digit lists."""
    a, b = _magnitude(num1), _magnitude(num2)
    x, y = to_digits(a), to_digits(b)
    if not x or not y:
        raise ValueError("both operands must contain at least one digit")
    return a, b, x, y


def add_signed(num1: str, num2: str) -> str:
    """Return the sum of two signed numerals as a signed numeral."""
    case = sign_case(num1, num2)
    a, b, x, y = _operands(num1, num2)
    if case is SignCase.BOTH_POSITIVE:
        return format_digits(add(x, y), False)
    if case is SignCase.BOTH_NEGATIVE:
        return format_digits(add(x, y), True)

    order = compare_strings(a, b)
    if order == 0:
        return _ZERO
    if case is SignCase.SECOND_NEGATIVE:
        if order > 0:
            return format_digits(subtract(x, y), False)
        return format_digits(subtract(y, x), True)
    if order > 0:
        return format_digits(strip_leading_zeros(subtract(x, y)), True)
    return format_digits(subtract(y, x), False)


def subtract_signed(num1: str, num2: str) -> str:
    """Return ``num1 - num2`` for two signed numerals."""
    case = sign_case(num1, num2)
    a, b, x, y = _operands(num1, num2)
    if case is SignCase.SECOND_NEGATIVE:
        return format_digits(add(x, y), False)
    if case is SignCase.FIRST_NEGATIVE:
        return format_digits(add(x, y), True)

    order = compare_strings(a, b)
    if order == 0:
        return _ZERO
    if order > 0:
        difference = strip_leading_zeros(subtract(x, y))
        return format_digits(difference, case is SignCase.BOTH_NEGATIVE)
    difference = strip_leading_zeros(subtract(y, x))
    return format_digits(difference, case is SignCase.BOTH_POSITIVE)


def multiply_signed(num1: str, num2: str) -> str:
    """Return the product of two signed numerals."""
    case = sign_case(num1, num2)
    _, _, x, y = _operands(num1, num2)
    return format_digits(multiply(x, y), case in _OPPOSITE_SIGNS)


def divide_signed(num1: str, num2: str) -> str:
    """Return the quotient of two signed numerals, truncated toward zero."""
    case = sign_case(num1, num2)
    divisor = _magnitude(num2)
    if divisor and not divisor.strip("0"):
        raise DivisionByZero("Division by zero is undefined.")
    a, b, x, y = _operands(num1, num2)
    negative = case in _OPPOSITE_SIGNS

    order = compare_strings(a, b)
    if order < 0:
        return _ZERO
    if order == 0:
        return "-1" if negative else "1"
    quotient = divide(x, y)
    return f"-{quotient}" if negative else str(quotient)


_DISPATCH: dict[str, Callable[[str, str], str]] = {
    "+": add_signed,
    "-": subtract_signed,
    "x": multiply_signed,
    "/": divide_signed,
}


def evaluate(expression: Expression) -> str:
    """Evaluate a validated expression and return the result as a numeral."""
    try:
        operation = _DISPATCH[expression.operator]
    except KeyError:
        raise InvalidArguments("Invalid Input:-( Try again...") from None
    return operation(expression.left, expression.right)