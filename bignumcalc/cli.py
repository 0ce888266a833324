"""Command-line entry point: ``bignumcalc <number> <operator> <number>``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .operations import DivisionByZero, evaluate
from .validation import InvalidArguments, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate one expression given on the command line and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        expression = parse_arguments(args)
    except InvalidArguments as exc:
        print(f"INFO: {exc}")
        print("INFO : Command line argument should have length 4")
        return 0

    try:
        result = evaluate(expression)
    except DivisionByZero:
        print("Error: Division by zero is undefined.")
        return 0
    except InvalidArguments as exc:
        print(exc)
        return 0
    except ValueError as exc:
        print(f"INFO: {exc}")
        return 0

    print(f"Result : {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())