"""LIFO stacks backed by an array and a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_EMPTY = "Stack is empty"


class ArrayStack:
    """A last-in first-out stack stored in a growable array."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity <= 0:
            raise ValueError("Can't create a stack with capacity <= 0")
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items[-1]


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedStack:
    """A last-in first-out stack stored in a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return self._size == 0

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY)
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the top value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY)
        return self._head.value


def balanced_parentheses(text: str) -> bool:
    """Return True when every '(' in ``text`` is closed.

    A ')' with nothing open is ignored, so only unclosed '(' make the text
    unbalanced.
    """
    stack = LinkedStack()
    for char in text:
        if char == "(":
            stack.push(0)
        elif char == ")" and not stack.is_empty():
            stack.pop()
    return stack.is_empty()