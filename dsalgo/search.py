"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def binary_search(items: Sequence[int], value: int) -> Optional[int]:
    """Return the index of ``value`` in ascending ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        current = items[mid]
        if current == value:
            return mid
        if current > value:
            end = mid - 1
        else:
            start = mid + 1
    return None


def reverse_binary_search(items: Sequence[int], value: int) -> Optional[int]:
    """Return the index of ``value`` in descending ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        current = items[mid]
        if current == value:
            return mid
        if current > value:
            start = mid + 1
        else:
            end = mid - 1
    return None