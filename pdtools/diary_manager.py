"""Storage and lookup of diaries kept in a .pdi file."""

from __future__ import annotations

import bisect
import dataclasses
import os
from dataclasses import dataclass, field

from .date import Date
from .structures import (
    HEADER_BASE,
    HEADER_LENGTH,
    ContentList,
    Header,
    Metadata,
    MetadataBasis,
    MetadataList,
    Section,
)

DEFAULT_FILE_PATH = "diary.pdi"


class DiaryNotFoundError(LookupError):
    """Raised when no diary exists for the requested date."""

    def __init__(self, date: Date) -> None:
        super().__init__(f"Date not found: {date}")
        self.date = date


@dataclass
class Diary:
    """A diary entry: its metadata and its lines of content."""

    metadata: Metadata = field(default_factory=Metadata)
    content: list[str] = field(default_factory=list)
    valid: bool = True


class _LineCursor:
    """Sequential line reader that yields empty lines past the end."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    def read(self) -> str:
        if self._pos < len(self._lines):
            line = self._lines[self._pos]
            self._pos += 1
            return line
        self._pos += 1
        return ""

    def skip(self, count: int) -> None:
        self._pos += max(count, 0)


class DiaryManager:
    """Holds diaries in memory and reads or writes them as a .pdi file."""

    def __init__(self, filepath: str = DEFAULT_FILE_PATH) -> None:
        self.filepath = filepath
        self._initialize()
        if os.path.isfile(filepath):
            self.load(filepath)

    def _initialize(self) -> None:
        self._header = Header()
        self._metadata_list = MetadataList()
        self._content_list = ContentList()
        self._reorganize()

    def _reorganize(self) -> None:
        """Recompute content offsets and the section layout."""
        total = 0
        for meta in self._metadata_list:
            meta.start = total
            total += meta.length
        base = HEADER_BASE + HEADER_LENGTH
        count = len(self._metadata_list)
        layout = self._header.start_line
        layout[Section.HEADER] = HEADER_BASE
        layout[Section.METADATA] = base
        layout[Section.CONTENT] = base + count
        layout[Section.END_OF_FILE] = base + count + total

    def load(self, filepath: str) -> None:
        """Replace the held diaries with those stored in *filepath*.

        Raises HeaderError for a file that is not a diary file and
        ValueError for a malformed metadata line.
        """
        with open(filepath, encoding="utf-8") as stream:
            header = Header.parse(stream)
            rest = stream.read()
        lines = rest.split("\n")
        if rest.endswith("\n"):
            lines.pop()
        cursor = _LineCursor(lines)

        current = HEADER_BASE + HEADER_LENGTH
        cursor.skip(header.start_line[Section.METADATA] - current)
        current = header.start_line[Section.METADATA]

        metadata = MetadataList()
        for _ in range(header.num_diaries):
            line = cursor.read()
            if not line:
                continue
            metadata.append(Metadata.from_line(line, len(metadata)))
            current += 1

        content_start = header.start_line[Section.CONTENT]
        cursor.skip(content_start - current)
        current = content_start

        contents = []
        for meta in metadata:
            start = content_start + meta.start
            cursor.skip(start - current)
            current = start
            contents.append([cursor.read() for _ in range(meta.length)])
            current += meta.length

        metadata.sort()
        header.num_diaries = len(metadata)
        self._header = header
        self._metadata_list = metadata
        self._content_list = ContentList(contents)

    def save(self, filepath: str | None = None) -> None:
        """Write the diaries to *filepath*, or to the manager's own file."""
        self._reorganize()
        path = filepath or self.filepath
        with open(path, "w", encoding="utf-8", newline="\n") as out:
            self._header.write(out)
            for meta in self._metadata_list:
                out.write(meta.to_line() + "\n")
            for meta in self._metadata_list:
                for line in self._content_list[meta.index][: meta.length]:
                    out.write(line + "\n")

    def add_diary(self, diary: Diary) -> None:
        """Add *diary*; an entry marked invalid is ignored."""
        if not diary.valid:
            return
        content = list(diary.content)
        metadata = Metadata(
            diary.metadata.date,
            diary.metadata.title,
            length=len(content),
            index=len(self._content_list),
        )
        self._content_list.append(content)
        self._content_list.reset_deleted(False)
        for position, _ in enumerate(self._content_list):
            if position != metadata.index and not self._is_live(position):
                self._content_list.mark_deleted(position, True)
        bisect.insort(self._metadata_list, metadata)
        self._header.num_diaries += 1

    def _is_live(self, index: int) -> bool:
        return any(meta.index == index for meta in self._metadata_list)

    def remove_diary(self, date: Date) -> None:
        """Remove the diary for *date*; raise DiaryNotFoundError if absent."""
        position = self._metadata_list.binary_search(date)
        if position is None:
            raise DiaryNotFoundError(date)
        meta = self._metadata_list.pop(position)
        self._content_list.mark_deleted(meta.index, True)
        self._header.num_diaries -= 1

    def get_diary(self, date: Date) -> Diary:
        """Return the diary for *date*; raise DiaryNotFoundError if absent."""
        position = self._metadata_list.binary_search(date)
        if position is None:
            raise DiaryNotFoundError(date)
        meta = self._metadata_list[position]
        return Diary(dataclasses.replace(meta), list(self._content_list[meta.index]))

    def get_metadata_list(self, start_date: Date, end_date: Date) -> list[MetadataBasis]:
        """Dates and titles of diaries between the two dates, inclusive.

        Raises ValueError if *end_date* precedes *start_date*.
        """
        if end_date < start_date:
            raise ValueError("Invalid date range")
        return [
            meta.basis()
            for meta in self._metadata_list
            if start_date <= meta.date <= end_date
        ]