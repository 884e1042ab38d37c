"""Signed fractions kept in lowest terms."""

from __future__ import annotations

import math

from .date import parse_int_prefix

_ZERO_DENOMINATOR = "Denominator cannot be zero"


def _sgn(value: int) -> int:
    return (value > 0) - (value < 0)


def _split_sign(text: str) -> tuple[int, str]:
    """Return the sign and the text after the first minus, if any."""
    minus = text.find("-")
    if minus == -1:
        return 1, text
    return -1, text[minus + 1:]


class Fraction:
    """A rational number stored as sign, numerator and denominator.

    Numerator and denominator are non-negative and coprime; the sign is
    1, -1, or 0 for zero.
    """

    __slots__ = ("_numerator", "_denominator", "_sign")

    def __init__(self, numerator: int = 0, denominator: int = 1, sign: int | None = None) -> None:
        """Build ``numerator/denominator``.

        Without *sign* the sign comes from the signs of the two terms;
        with it, the terms are taken by absolute value and *sign* is used
        as given. Raises ZeroDivisionError for a zero denominator.
        """
        if denominator == 0:
            raise ZeroDivisionError(_ZERO_DENOMINATOR)
        if sign is None:
            sign = _sgn(numerator) * _sgn(denominator)
        numerator, denominator = abs(numerator), abs(denominator)
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor
        self._sign = sign

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def sign(self) -> int:
        return self._sign

    def _signed(self) -> int:
        return self._sign * self._numerator

    def __add__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        common = math.lcm(self._denominator, other._denominator)
        total = (self._signed() * (common // self._denominator)
                 + other._signed() * (common // other._denominator))
        return Fraction(total, common)

    def __sub__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        common = math.lcm(self._denominator, other._denominator)
        total = (self._signed() * (common // self._denominator)
                 - other._signed() * (common // other._denominator))
        return Fraction(total, common)

    def __mul__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
            self._sign * other._sign,
        )

    def __truediv__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
            self._sign * other._sign,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (
            self._sign == other._sign
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        return hash((self._sign, self._numerator, self._denominator))

    def __lt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        if self._sign != other._sign:
            return self._sign < other._sign
        if self._sign == 0:
            return False
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return lhs < rhs if self._sign == 1 else lhs > rhs

    def __le__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self < other

    def __float__(self) -> float:
        return self._numerator / self._denominator * self._sign

    def __str__(self) -> str:
        if self._sign == 0:
            return "0"
        text = ("-" if self._sign == -1 else "") + str(self._numerator)
        if self._denominator != 1:
            text += f"/{self._denominator}"
        return text

    def __repr__(self) -> str:
        return f"Fraction({self._signed()}, {self._denominator})"

    @classmethod
    def from_string(cls, text: str) -> Fraction:
        """Parse ``[-]n[/d]``.

        Raises ValueError for text without digits and ZeroDivisionError
        for a zero denominator.
        """
        sign, body = _split_sign(text)
        num_text, slash, den_text = body.partition("/")
        numerator = parse_int_prefix(num_text)
        denominator = parse_int_prefix(den_text) if slash else 1
        if numerator == 0:
            sign = 0
        return cls(numerator, denominator, sign)

    @classmethod
    def from_decimal_string(cls, text: str) -> Fraction:
        """Parse ``[-]i[.f]`` as a decimal number.

        The fractional part is read as an integer, so its leading zeros
        are not significant. Raises ValueError for text without digits.
        """
        sign, body = _split_sign(text)
        int_text, dot, frac_text = body.partition(".")
        if not dot:
            numerator = parse_int_prefix(int_text)
            denominator = 1
        else:
            integer_part = parse_int_prefix(int_text) if int_text else 0
            decimal_part = parse_int_prefix(frac_text)
            digits = len(str(decimal_part)) if decimal_part > 0 else 0
            denominator = 10 ** digits
            numerator = integer_part * denominator + decimal_part
        if numerator == 0:
            sign = 0
        return cls(numerator, denominator, sign)

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """Parse *text* as a fraction if it holds a slash, else as a decimal."""
        if "/" in text:
            return cls.from_string(text)
        return cls.from_decimal_string(text)