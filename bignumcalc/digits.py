"""Arbitrary-precision arithmetic on lists of decimal digits.

A number is a list of ints in the range 0-9, most significant digit first.
Results keep the digit-by-digit layout of schoolbook arithmetic, so they may
carry leading zeros; use :func:`strip_leading_zeros` to normalise them.
"""

from __future__ import annotations

from itertools import zip_longest

_DECIMAL = frozenset("0123456789")


def _require_operands(a: list[int], b: list[int]) -> None:
    if not a or not b:
        raise ValueError("both operands must contain at least one digit")


def _trimmed(digits: list[int]) -> list[int]:
    """Drop leading zeros, keeping at least one digit; empty stays empty."""
    for index, digit in enumerate(digits):
        if digit != 0:
            return list(digits[index:])
    return list(digits[-1:])


def to_digits(text: str) -> list[int]:
    """Convert a string of decimal characters into a digit list."""
    if not all(ch in _DECIMAL for ch in text):
        raise ValueError(f"not a decimal number: {text!r}")
    return [int(ch) for ch in text]


def add(a: list[int], b: list[int]) -> list[int]:
    """Add two digit lists column by column."""
    _require_operands(a, b)
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        total = x + y + carry
        result.append(total % 10)
        carry = total // 10
    if carry:
        result.append(carry)
    result.reverse()
    return result


def subtract(a: list[int], b: list[int]) -> list[int]:
    """Subtract ``b`` from ``a``; ``a`` must not be smaller than ``b``."""
    _require_operands(a, b)
    result: list[int] = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        x -= borrow
        borrow = 1 if x < y else 0
        result.append(x + borrow * 10 - y)
    if borrow:
        raise ValueError("subtrahend is larger than minuend")
    result.reverse()
    return result


def multiply(a: list[int], b: list[int]) -> list[int]:
    """Multiply two digit lists by summing shifted partial products."""
    _require_operands(a, b)
    total = [0]
    for shift, x in enumerate(reversed(a)):
        partial: list[int] = []
        carry = 0
        for y in reversed(b):
            product = x * y + carry
            partial.append(product % 10)
            carry = product // 10
        if carry:
            partial.append(carry)
        partial.reverse()
        partial.extend([0] * shift)
        total = add(partial, total)
    return total


def divide(a: list[int], b: list[int]) -> int:
    """Return the integer quotient of ``a`` by ``b`` using repeated subtraction."""
    _require_operands(a, b)
    if not any(b):
        raise ZeroDivisionError("division by zero")
    quotient = 0
    remainder = list(a)
    while compare(remainder, b) >= 0:
        remainder = strip_leading_zeros(subtract(remainder, b))
        quotient += 1
    return quotient


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """Remove leading zeros, always keeping at least one digit."""
    if not digits:
        raise ValueError("digit list is empty")
    return _trimmed(digits)


def compare(a: list[int], b: list[int]) -> int:
    """Compare two digit lists by value: 1 if a > b, -1 if a < b, else 0."""
    x = _trimmed(a)
    y = _trimmed(b)
    if len(x) != len(y):
        return 1 if len(x) > len(y) else -1
    return (x > y) - (x < y)


def format_digits(digits: list[int], negative: bool) -> str:
    """Render a digit list as text, with a leading minus sign if negative."""
    if not digits:
        raise ValueError("digit list is empty")
    sign = "-" if negative else ""
    return sign + "".join(str(d) for d in digits)