"""Validation of calculator arguments and sign handling of operands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_DECIMAL = frozenset("0123456789")
OPERATORS = frozenset("+x/-%")


class InvalidArguments(ValueError):
    """Raised when the command-line arguments do not form a valid expression."""


class SignCase(Enum):
    """Which of the two operands carry a minus sign."""

    BOTH_POSITIVE = 1
    SECOND_NEGATIVE = 2
    FIRST_NEGATIVE = 3
    BOTH_NEGATIVE = 4


@dataclass(frozen=True)
class Expression:
    """A validated binary expression: two signed numbers and an operator."""

    left: str
    operator: str
    right: str


def _check_number(text: str) -> None:
    magnitude = text[1:] if text.startswith("-") else text
    if not magnitude or not all(ch in _DECIMAL for ch in magnitude):
        raise InvalidArguments("Invalid arguments")


def parse_arguments(argv: list[str]) -> Expression:
    """Validate ``[number, operator, number]`` and return the expression."""
    if len(argv) != 3:
        raise InvalidArguments("Insufficient Arguments")
    left, operator, right = argv
    _check_number(left)
    _check_number(right)
    if len(operator) != 1:
        raise InvalidArguments("Operator must be a single character")
    if operator not in OPERATORS:
        raise InvalidArguments("Please pass valid operator[+,-,x,/]")
    return Expression(left, operator, right)


def sign_case(num1: str, num2: str) -> SignCase:
    """Classify the pair of operands by their signs."""
    first_negative = num1.startswith("-")
    second_negative = num2.startswith("-")
    if first_negative and second_negative:
        return SignCase.BOTH_NEGATIVE
    if first_negative:
        return SignCase.FIRST_NEGATIVE
    if second_negative:
        return SignCase.SECOND_NEGATIVE
    return SignCase.BOTH_POSITIVE


def compare_strings(num1: str, num2: str) -> int:
    """Compare unsigned numerals: longer is greater, equal lengths compare by text.

    Returns 1 if ``num1`` is greater, -1 if smaller and 0 if identical.
    """
    if len(num1) != len(num2):
        return 1 if len(num1) > len(num2) else -1
    return (num1 > num2) - (num1 < num2)