"""A list that keeps its integer values in ascending order."""

from __future__ import annotations

import bisect
from collections.abc import Iterator


class OrderedList:
    """A list whose values always stay sorted; insertion picks the position."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity <= 0:
            raise ValueError("Can't create an ordered list with capacity <= 0")
        self._sorted: list[int] = []

    def __len__(self) -> int:
        return len(self._sorted)

    def __iter__(self) -> Iterator[int]:
        yield from self._sorted

    def _position(self, index: int) -> int:
        if index < 0 or index >= len(self._sorted):
            raise IndexError(f"Invalid index: {index}")
        return index

    def add(self, value: int) -> None:
        """Insert ``value`` at the position that keeps the list sorted."""
        bisect.insort_left(self._sorted, value)

    def remove_at(self, index: int) -> int:
        """Remove and return the value at ``index``; raise IndexError if out of range."""
        return self._sorted.pop(self._position(index))

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if out of range."""
        return self._sorted[self._position(index)]

    def set(self, value: int, index: int) -> None:
        """Replace the value at ``index`` if the order is kept.

        Raises IndexError for a bad index and ValueError when ``value`` lies
        outside its neighbours.
        """
        position = self._position(index)
        before = self._sorted[:position][-1:]
        after = self._sorted[position + 1 :][:1]
        if any(value < low for low in before) or any(value > high for high in after):
            lower = before[0] if before else None
            upper = after[0] if after else None
            raise ValueError(
                f"Invalid input: please insert a value between {lower} and {upper}."
            )
        self._sorted[position] = value