"""Header, metadata and content structures of a .pdi diary file."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, TextIO

from .date import Date, parse_int_prefix


class Section(IntEnum):
    """Sections of a .pdi file, in file order."""

    HEADER = 0
    METADATA = 1
    CONTENT = 2
    END_OF_FILE = 3


NUM_SECTIONS = len(Section)
HEADER_BASE = 0
HEADER_LENGTH = 2
METADATA_DELIMITER = ";"
FILE_HEADER_STR = "Personal Diary Data File"


class HeaderError(ValueError):
    """Raised when a .pdi header cannot be parsed."""


def _empty_start_lines() -> list[int]:
    base = HEADER_BASE + HEADER_LENGTH
    return [HEADER_BASE, base, base, base]


@dataclass
class Header:
    """Identification line and section layout of a .pdi file."""

    file_header_str: str = FILE_HEADER_STR
    num_diaries: int = 0
    start_line: list[int] = field(default_factory=_empty_start_lines)

    @classmethod
    def parse(cls, stream: TextIO) -> Header:
        """Read the two header lines from *stream*."""
        first = stream.readline().rstrip("\n")
        if first != FILE_HEADER_STR:
            raise HeaderError("Not a valid personal diary data file")
        fields = stream.readline().split()
        if len(fields) < 4:
            raise HeaderError("Header format error")
        try:
            num, metadata, content, end = (int(value) for value in fields[:4])
        except ValueError as exc:
            raise HeaderError("Header format error") from exc
        return cls(first, num, [HEADER_BASE, metadata, content, end])

    def write(self, stream: TextIO) -> None:
        """Write the two header lines to *stream*."""
        stream.write(self.file_header_str + "\n")
        layout = self.start_line[Section.METADATA:]
        stream.write(" ".join(str(n) for n in (self.num_diaries, *layout)) + "\n")


@dataclass
class MetadataBasis:
    """Date and title of a diary."""

    date: Date = field(default_factory=Date)
    title: str = ""

    def __str__(self) -> str:
        return f"{self.date} {self.title}"


@dataclass
class Metadata(MetadataBasis):
    """Diary date and title plus where its content is stored."""

    start: int = 0
    length: int = 0
    index: int = 0

    @classmethod
    def from_line(cls, line: str, index: int = 0) -> Metadata:
        """Parse a ``date;title;start;length`` metadata line."""
        parts = line.rstrip("\n").split(METADATA_DELIMITER, 3)
        if len(parts) < 4:
            raise ValueError(f"invalid metadata line: {line!r}")
        date_str, title, start, length = parts
        return cls(
            Date.from_string(date_str),
            title,
            parse_int_prefix(start),
            parse_int_prefix(length),
            index,
        )

    def to_line(self) -> str:
        """Render as a ``date;title;start;length`` metadata line."""
        return METADATA_DELIMITER.join(
            (str(self.date), self.title, str(self.start), str(self.length))
        )

    def basis(self) -> MetadataBasis:
        """Return only the date and title."""
        return MetadataBasis(self.date, self.title)

    def __lt__(self, other: Metadata) -> bool:
        return self.date < other.date


class MetadataList(list):
    """Metadata entries kept sorted by date."""

    def binary_search(self, date: Date) -> int | None:
        """Return the position of the entry with *date*, or None."""
        pos = bisect.bisect_left(self, date, key=lambda meta: meta.date)
        if pos < len(self) and self[pos].date == date:
            return pos
        return None


class ContentList(list):
    """Diary contents (lists of lines) with a deleted flag per entry."""

    def __init__(self, contents: Iterable[list[str]] = ()) -> None:
        super().__init__(contents)
        self._deleted: list[bool] = [False] * len(self)

    def is_deleted(self, index: int) -> bool:
        """Whether the content at *index* is flagged as deleted."""
        return self._deleted[index]

    def mark_deleted(self, index: int, value: bool = True) -> None:
        """Set the deleted flag of the content at *index*."""
        self._deleted[index] = value

    def reset_deleted(self, value: bool = False) -> None:
        """Set the deleted flag of every content to *value*."""
        self._deleted = [value] * len(self)