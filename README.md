# pdtools

A small personal diary kept in a single plain-text file, `diary.pdi`, in the
current directory. The package also holds two self-contained helpers: an
exact `Fraction` type and a growable `Vector` container.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The diary commands

Each command works on `diary.pdi` in the directory you run it from. If the
file does not exist yet, the first `pdadd` creates it.

### pdadd — write an entry

```
pdadd
```

You are asked for the date (`YYYY-MM-DD`), a title, and then the body, one
line at a time. A line holding only `.` ends the entry, as does the end of
input. Prompts are shown only when input comes from a terminal, so entries
can also be piped in:

```
printf '2024-03-01\nFirst day\nIt rained.\nThen it stopped.\n.\n' | pdadd
```

An invalid date (for example `2023-02-29`) prints `Invalid date format.`,
nothing is saved, and the command exits with a failure status.

### pdlist — list entries in a date range

```
pdlist 2024-01-01 2024-12-31
```

Prints one numbered line per entry in the range (both ends included),
ordered by date:

```
0: 2024-03-01 First day
```

It needs exactly two dates. An end date before the start date prints an
error on standard error and lists nothing.

### pdshow — print entries

```
pdshow 2024-03-01 2024-03-02
```

Prints the date, title and body of each entry asked for, each followed by a
line of dashes. Dates with no entry are reported as `No diary for DATE`, and
invalid dates as `Invalid date: ...`. With no arguments, `pdshow` reads lines
of the form `ID: DATE` from standard input, so it pairs with `pdlist`:

```
pdlist 2024-01-01 2024-12-31 | pdshow
```

### pdremove — delete an entry

```
pdremove 2024-03-01
```

With no argument the date is read from standard input. The command exits with
a failure status when there is no entry for that date.

### pdtools — all four in one

```
pdtools add
pdtools list 2024-01-01 2024-12-31
pdtools show 2024-03-01
pdtools remove 2024-03-01
```

The first argument names the command; the rest are passed to it.

## Using the diary from Python

```python
from pdtools.date import Date
from pdtools.diary_manager import DiaryManager

manager = DiaryManager("diary.pdi")
for entry in manager.get_metadata_list(Date.from_string("2024-01-01"),
                                       Date.from_string("2024-12-31")):
    print(entry)
```

`DiaryManager` loads the file if it exists and otherwise starts empty. It
also offers `add_diary` (taking a `Diary`), `remove_diary`, `get_diary`,
`load` and `save`. Asking for or removing a date that has no entry raises
`DiaryNotFoundError`; loading a file that does not start with the diary
header raises `HeaderError`.

`Date` compares chronologically, prints as `YYYY-MM-DD`, and has
`is_valid()` and `is_leap_year()`.

### The .pdi file

The file starts with the line `Personal Diary Data File`, followed by a line
with the number of entries and the line numbers where the metadata section,
the content section and the end of file begin. Each metadata line reads
`YYYY-MM-DD;title;start;length`, where `start` and `length` locate the
entry's body lines inside the content section. Entries are written in date
order.

## Fractions

```python
from pdtools.fraction import Fraction

a = Fraction.parse("1/2")
b = Fraction.parse("0.25")
print(a + b, a - b, a * b, a / b)   # 3/4 1/4 1/8 2
print(a > b, float(b))              # True 0.25
```

Fractions are always kept in lowest terms; a zero denominator raises
`ZeroDivisionError`. `Fraction.from_string` reads `n/d` or an integer,
`Fraction.from_decimal_string` reads decimals such as `-1.5`, and
`Fraction.parse` picks between them by looking for a slash.

The `fraction-demo` command reads a stream of requests from standard input:
a selector (`0` arithmetic, `1` comparisons, `2` input, `3` output,
`4` conversion, `5` conversion from a decimal string) followed by its
operands. Any other selector ends the run.

```
echo "0 1/2 1/3 1 3/4 0.75" | fraction-demo
```

## Vector

```python
from pdtools.vector import Vector

v = Vector()
for n in range(5):
    v.append(n)
print(len(v), v.at(2), list(v))
v.at(10)   # raises IndexError
```

`Vector(size)` starts with `size` elements set to `None`. `at` and `set_at`
check the index and raise `IndexError` when it is out of range; plain
indexing does not. `copy` gives an independent copy, `clear` empties it, and
`capacity()` reports how much room is reserved, doubling as elements are
appended.