"""Double-ended queues backed by a circular array and by a doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_EMPTY = "Deque is empty"


class ArrayDeque:
    """A deque stored in a circular array that doubles when full."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity <= 0:
            raise ValueError("Can't create a deque with capacity <= 0")
        self._slots = [0] * capacity
        self._front = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the deque holds no values."""
        return self._size == 0

    def _index(self, offset: int) -> int:
        return (self._front + offset) % len(self._slots)

    def _grow_if_full(self) -> None:
        if self._size < len(self._slots):
            return
        values = [self._slots[self._index(offset)] for offset in range(self._size)]
        self._slots = values + [0] * len(values)
        self._front = 0

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the current front."""
        self._grow_if_full()
        self._front = self._index(-1)
        self._slots[self._front] = value
        self._size += 1

    def push_rear(self, value: int) -> None:
        """Insert ``value`` after the current rear."""
        self._grow_if_full()
        self._slots[self._index(self._size)] = value
        self._size += 1

    def _peek(self, offset: int) -> int:
        if self._size == 0:
            raise IndexError(_EMPTY)
        return self._slots[self._index(offset)]

    def front(self) -> int:
        """Return the front value; raise IndexError when empty."""
        return self._peek(0)

    def rear(self) -> int:
        """Return the rear value; raise IndexError when empty."""
        return self._peek(self._size - 1)

    def pop_front(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        value = self.front()
        self._front = self._index(1)
        self._size -= 1
        return value

    def pop_rear(self) -> int:
        """Remove and return the rear value; raise IndexError when empty."""
        value = self.rear()
        self._size -= 1
        return value


@dataclass(eq=False)
class _Node:
    value: int
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class LinkedDeque:
    """A deque stored in a doubly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the deque holds no values."""
        return self._size == 0

    def _link(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node
        else:
            node.prev.next = node
        if node.next is None:
            self._tail = node
        else:
            node.next.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    @staticmethod
    def _require(node: Optional[_Node]) -> _Node:
        if node is None:
            raise IndexError(_EMPTY)
        return node

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the current front."""
        self._link(_Node(value, next=self._head))

    def push_rear(self, value: int) -> None:
        """Insert ``value`` after the current rear."""
        self._link(_Node(value, prev=self._tail))

    def pop_front(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        return self._unlink(self._require(self._head))

    def pop_rear(self) -> int:
        """Remove and return the rear value; raise IndexError when empty."""
        return self._unlink(self._require(self._tail))

    def front(self) -> int:
        """Return the front value; raise IndexError when empty."""
        return self._require(self._head).value

    def rear(self) -> int:
        """Return the rear value; raise IndexError when empty."""
        return self._require(self._tail).value