"""Command-line tools that add, list, show and remove diaries in diary.pdi."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .date import Date
from .diary_manager import Diary, DiaryManager, DiaryNotFoundError
from .structures import Metadata

DIARY_FILE = "diary.pdi"
SEPARATOR = "-" * 51


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _prompt(enabled: bool, text: str) -> None:
    if enabled:
        sys.stdout.write(text)
        sys.stdout.flush()


def _load_manager() -> DiaryManager | None:
    try:
        return DiaryManager(DIARY_FILE)
    except (OSError, ValueError) as exc:
        print(f"Cannot load {DIARY_FILE}: {exc}", file=sys.stderr)
        return None


def _parse_date(text: str) -> Date | None:
    try:
        date = Date.from_string(text)
    except ValueError:
        return None
    return date if date.is_valid() else None


def _next_nonblank(stream: TextIO) -> str:
    for line in stream:
        if line.strip():
            return line
    return ""


def _read_token(stream: TextIO) -> str:
    tokens = _next_nonblank(stream).split()
    return tokens[0] if tokens else ""


def pdadd(argv: Sequence[str] | None = None) -> int:
    """Read a date, a title and content lines from stdin and store a diary."""
    stdin = sys.stdin
    interactive = stdin.isatty()
    manager = _load_manager()
    if manager is None:
        return 1

    _prompt(interactive, "Enter the date (YYYY-MM-DD): ")
    stripped = _next_nonblank(stdin).lstrip()
    tokens = stripped.split()
    date_text = tokens[0] if tokens else ""
    rest = stripped[len(date_text):].rstrip("\n")
    _prompt(interactive, "Enter the diary title: ")
    title = rest[1:] if rest else stdin.readline().rstrip("\n")

    date = _parse_date(date_text)
    if date is None:
        print("Invalid date format.")
        return 1

    content = []
    _prompt(interactive, "Enter the diary content: \n> ")
    while True:
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\n")
        if line == ".":
            break
        content.append(line)
        _prompt(interactive, "> ")

    manager.add_diary(Diary(Metadata(date, title), content))
    manager.save()
    return 0


def pdlist(argv: Sequence[str] | None = None) -> int:
    """Print the diaries between two dates given as arguments."""
    args = _args(argv)
    if len(args) != 2:
        print("Usage: pdlist <start_date> <end_date>")
        return 1
    manager = _load_manager()
    if manager is None:
        return 1

    start, end = _parse_date(args[0]), _parse_date(args[1])
    if start is None or end is None:
        print("Invalid date.")
        return 1

    try:
        records = manager.get_metadata_list(start, end)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 0
    for number, record in enumerate(records):
        print(f"{number}: {record}")
    return 0


def pdremove(argv: Sequence[str] | None = None) -> int:
    """Remove the diary for a date given as argument or read from stdin."""
    args = _args(argv)
    if args:
        date_text = args[0]
    else:
        _prompt(sys.stdin.isatty(), "Enter the date (YYYY-MM-DD) to remove: ")
        date_text = _read_token(sys.stdin)

    manager = _load_manager()
    if manager is None:
        return 1

    date = _parse_date(date_text)
    if date is None:
        print("Invalid date format.")
        return 1

    try:
        manager.remove_diary(date)
        removed = True
    except DiaryNotFoundError:
        print("Date not found", file=sys.stderr)
        removed = False
    manager.save()
    return 0 if removed else 1


def _dates_from_stdin() -> list[Date]:
    dates = []
    for line in sys.stdin:
        line = line.rstrip("\n")
        if not line:
            continue
        tokens = line.split()
        date_text = tokens[1] if len(tokens) > 1 else ""
        date = _parse_date(date_text)
        if date is None:
            print(f"Invalid date: {date_text}")
        else:
            dates.append(date)
    return dates


def pdshow(argv: Sequence[str] | None = None) -> int:
    """Print the diaries for dates given as arguments or as pdlist lines."""
    args = _args(argv)
    if args:
        dates = []
        for text in args:
            date = _parse_date(text)
            if date is None:
                print(f"Invalid date: {text}")
            else:
                dates.append(date)
    else:
        dates = _dates_from_stdin()

    if not dates:
        print("No date specified.")
        return 1

    manager = _load_manager()
    if manager is None:
        return 1

    for date in dates:
        try:
            diary = manager.get_diary(date)
        except DiaryNotFoundError:
            print("Date not found", file=sys.stderr)
            print(f"No diary for {date}")
            continue
        print(f"Date: {date}")
        print(f"Title: {diary.metadata.title}")
        for line in diary.content:
            print(line)
        print(SEPARATOR)
    return 0


COMMANDS = {"add": pdadd, "list": pdlist, "remove": pdremove, "show": pdshow}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the subcommand named by the first argument."""
    args = _args(argv)
    if not args or args[0] not in COMMANDS:
        print("Usage: pdtools {add|list|remove|show} [args...]", file=sys.stderr)
        return 2
    return COMMANDS[args[0]](args[1:])


if __name__ == "__main__":
    sys.exit(main())