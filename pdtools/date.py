"""Calendar dates as used in diary metadata."""

from __future__ import annotations

import re
from dataclasses import dataclass

DATE_DELIMITER = "-"

# Days per month, index 0 unused.
MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(text: str) -> int:
    """Parse the leading integer of *text*, ignoring anything after it.

    Leading whitespace and a sign are accepted. Raises ValueError when
    no digits start the text.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


@dataclass(frozen=True, order=True)
class Date:
    """A year/month/day triple, ordered chronologically."""

    year: int = 0
    month: int = 0
    day: int = 0

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Build a date from a ``YYYY-MM-DD`` string.

        Raises ValueError if a component is missing or not a number.
        """
        text = text.split("\n", 1)[0]
        parts = text.split(DATE_DELIMITER, 2)
        if len(parts) < 3:
            raise ValueError(f"invalid date: {text!r}")
        year, month, day = (parse_int_prefix(part) for part in parts)
        return cls(year, month, day)

    def is_leap_year(self) -> bool:
        """Whether the year is a Gregorian leap year."""
        return self.year % 4 == 0 and (self.year % 100 != 0 or self.year % 400 == 0)

    def is_valid(self) -> bool:
        """Whether the month exists and the day lies within it."""
        if not 1 <= self.month <= 12:
            return False
        extra = 1 if self.month == 2 and self.is_leap_year() else 0
        return 1 <= self.day <= MONTH_DAYS[self.month] + extra

    def __str__(self) -> str:
        month = ("0" if self.month < 10 else "") + str(self.month)
        day = ("0" if self.day < 10 else "") + str(self.day)
        return DATE_DELIMITER.join((str(self.year), month, day))