"""FIFO queues backed by a bounded array and a linked list, and a min-heap."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Optional

_EMPTY = "Queue is empty"
_FULL = "Queue is full"


class ArrayQueue:
    """A first-in first-out queue with a fixed capacity."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity <= 0:
            raise ValueError("Can't create a queue with capacity <= 0")
        self._capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear; raise OverflowError when full."""
        if len(self._items) == self._capacity:
            raise OverflowError(_FULL)
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items.popleft()

    def front(self) -> int:
        """Return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items[0]


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedQueue:
    """An unbounded first-in first-out queue stored in a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._size == 0

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY)
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY)
        return self._head.value


class BinaryHeap:
    """A binary min-heap used as a priority queue."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] >= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def add(self, value: int) -> None:
        """Insert ``value``."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; do nothing if it is absent."""
        try:
            index = self._items.index(value)
        except ValueError:
            return
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_up(index)
            self._sift_down(index)

    def poll(self) -> int:
        """Remove and return the smallest value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("heap is empty")
        smallest = self._items[0]
        self.remove(smallest)
        return smallest


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the priority queue."""
    argparse.ArgumentParser(description="Priority queue demonstration.").parse_args(argv)
    heap = BinaryHeap()
    for value in (5, 3, 8, 1, 2):
        heap.add(value)
    for _ in range(3):
        print("Pool:", heap.poll())
    heap.add(4)
    heap.remove(5)
    for _ in range(2):
        print("Pool:", heap.poll())
    return 0