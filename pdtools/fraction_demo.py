"""Interactive exercise of Fraction driven by whitespace-separated commands."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Iterable, Iterator, Sequence

from .fraction import Fraction

_HEADER = "[\033[1;32mTest #0 for type {}\033[0m]"


class TestType(IntEnum):
    """Command numbers accepted by :func:`run`."""

    ARITHMETICAL_OPERATIONS = 0
    RELATIONAL_OPERATIONS = 1
    INPUT_FROM_STREAM = 2
    OUTPUT_TO_STREAM = 3
    CONVERSION = 4
    CONVERSION_FROM_STRING = 5


def arithmetic_report(f1: Fraction, f2: Fraction) -> list[str]:
    """Lines showing the sum, difference, product and quotient."""
    return [
        f"{f1} + {f2} = {f1 + f2}",
        f"{f1} - {f2} = {f1 - f2}",
        f"{f1} * {f2} = {f1 * f2}",
        f"{f1} / {f2} = {f1 / f2}",
    ]


def relational_report(f1: Fraction, f2: Fraction) -> list[str]:
    """Lines showing each comparison result as 1 or 0."""
    return [
        f"{f1} == {f2} : {int(f1 == f2)}",
        f"{f1}!= {f2} : {int(f1 != f2)}",
        f"{f1} < {f2} : {int(f1 < f2)}",
        f"{f1} <= {f2} : {int(f1 <= f2)}",
        f"{f1} > {f2} : {int(f1 > f2)}",
        f"{f1} >= {f2} : {int(f1 >= f2)}",
    ]


def conversion_report(fraction: Fraction, original: str) -> list[str]:
    """Lines showing *fraction* as a float and as a string."""
    return [
        f"{original} to double = {float(fraction):g}",
        f"{original} to string = {fraction}",
    ]


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run(stream: Iterable[str]) -> Iterator[str]:
    """Execute the commands read from *stream*, yielding output lines.

    Stops at the first token that is not a command number from 0 to 5.
    Raises ValueError when an operand is missing or malformed.
    """
    tokens = _tokens(stream)

    def operand() -> str:
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        return token

    for token in tokens:
        try:
            select = TestType(int(token))
        except ValueError:
            return
        yield _HEADER.format(int(select))
        if select is TestType.ARITHMETICAL_OPERATIONS:
            f1, f2 = Fraction.parse(operand()), Fraction.parse(operand())
            yield from arithmetic_report(f1, f2)
        elif select is TestType.RELATIONAL_OPERATIONS:
            f1, f2 = Fraction.parse(operand()), Fraction.parse(operand())
            yield from relational_report(f1, f2)
        elif select is TestType.INPUT_FROM_STREAM:
            yield f"Input from stream: {Fraction.parse(operand())}"
        elif select is TestType.OUTPUT_TO_STREAM:
            yield str(Fraction.parse(operand()))
        elif select is TestType.CONVERSION:
            text = operand()
            yield from conversion_report(Fraction.from_string(text), text)
        else:
            text = operand()
            yield f"{text} to Fraction = {Fraction.from_decimal_string(text)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the commands given on standard input."""
    try:
        for line in run(sys.stdin):
            print(line)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())