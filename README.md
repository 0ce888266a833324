# bignumcalc

A command-line calculator for integers of any length. Each number is handled
as a list of decimal digits, so the size of an operand is not limited by a
machine word.

## Installation

```
pip install .
```

## Usage

```
bignumcalc <number> <operator> <number>
```

Operators:

| Operator | Meaning                                  |
|----------|------------------------------------------|
| `+`      | addition                                 |
| `-`      | subtraction                              |
| `x`      | multiplication                           |
| `/`      | integer division (quotient, toward zero) |

Either operand may start with a `-` sign. Every other character must be a
decimal digit.

Examples:

```
$ bignumcalc 123456789012345678901234567890 + 987654321098765432109876543210
Result : 1111111110111111111011111111100

$ bignumcalc 25 - 100
Result : -75

$ bignumcalc -12 x 12
Result : -144

$ bignumcalc 100 / 7
Result : 14
```

If the arguments are not two numbers and a single-character operator, the
command prints an `INFO:` line that says what was wrong. Division by zero
prints `Error: Division by zero is undefined.` The `%` character passes
validation, but no operation is defined for it, and the command prints
`Invalid Input:-( Try again...`. The command always exits with status 0.

### Points to keep in mind

- The digits are worked column by column, and some results keep the leading
  zeros that come out of the subtraction. For example, `bignumcalc 100 + -1`
  prints `Result : 099`.
- Operands of the same sign are compared by their number of characters first,
  so leading zeros in an operand can change which branch is taken.
- Division counts repeated subtractions. Large quotients therefore take a long
  time.
- There is no remainder operation.

## Using it as a library

```python
from bignumcalc.operations import add_signed, subtract_signed, divide_signed, evaluate
from bignumcalc.validation import parse_arguments

add_signed("-15", "12")          # "-3"
subtract_signed("25", "100")     # "-75"
divide_signed("1000", "-3")      # "-333"
evaluate(parse_arguments(["7", "x", "6"]))  # "42"
```

`parse_arguments` takes exactly three items (number, operator, number) and
raises `bignumcalc.validation.InvalidArguments` if they are not valid. It
returns an `Expression` with `left`, `operator` and `right` fields.
`divide_signed` raises `bignumcalc.operations.DivisionByZero` (a
`ZeroDivisionError`) when the divisor is zero. `bignumcalc.validation` also
provides `sign_case` and `compare_strings`, and the `SignCase` enum.

The lower-level routines in `bignumcalc.digits` work on lists of digits,
most significant digit first:

- `to_digits`
- `add`
- `subtract`: raises `ValueError` if the second operand is larger
- `multiply`
- `divide`: returns an `int` quotient and raises `ZeroDivisionError` for a zero divisor
- `compare`: returns 1, 0 or -1 and ignores leading zeros
- `strip_leading_zeros`
- `format_digits`

## Running the tests

```
pip install .[test]
pytest
```