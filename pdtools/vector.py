"""A growable sequence with explicit capacity that doubles when full."""

from __future__ import annotations

from typing import Any, Iterator

_OUT_OF_RANGE = "Index out of range"


class Vector:
    """An ordered, growable collection of values.

    Capacity starts at the initial size and doubles (from 1 when empty)
    whenever an append finds the vector full.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, size: int = 0) -> None:
        """Create a vector of *size* elements, each set to None."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._items: list[Any] = [None] * size
        self._capacity = size

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(_OUT_OF_RANGE)

    def at(self, index: int) -> Any:
        """Return the element at *index*; raise IndexError unless 0 <= index < len."""
        self._check(index)
        return self._items[index]

    def set_at(self, index: int, value: Any) -> None:
        """Replace the element at *index*; raise IndexError unless 0 <= index < len."""
        self._check(index)
        self._items[index] = value

    def append(self, value: Any) -> None:
        """Add *value* at the end, doubling the capacity if the vector is full."""
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 1
        self._items.append(value)

    def clear(self) -> None:
        """Remove every element and release the capacity."""
        self._items = []
        self._capacity = 0

    def copy(self) -> Vector:
        """Return an independent vector with the same elements and capacity."""
        duplicate = Vector()
        duplicate._items = list(self._items)
        duplicate._capacity = self._capacity
        return duplicate

    def capacity(self) -> int:
        """Number of elements the vector can hold before it grows."""
        return self._capacity