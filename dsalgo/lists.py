"""List types backed by a growable array, a singly and a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


def _check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError(f"Invalid index: {index}")


def _check_insert_index(index: int, size: int) -> None:
    if not 0 <= index <= size:
        raise IndexError(f"Invalid index: {index}")


class ArrayList:
    """A positional list stored in a contiguous array."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity <= 0:
            raise ValueError("Can't create a list with capacity <= 0")
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if out of range."""
        _check_index(index, len(self._items))
        return self._items[index]

    def set(self, value: int, index: int) -> None:
        """Replace the value at ``index``; raise IndexError if out of range."""
        _check_index(index, len(self._items))
        self._items[index] = value

    def add(self, value: int) -> None:
        """Append ``value`` at the end."""
        self._items.append(value)

    def insert(self, value: int, index: int) -> None:
        """Insert ``value`` at ``index`` (0 to len inclusive)."""
        _check_insert_index(index, len(self._items))
        self._items.insert(index, value)

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``; raise IndexError if out of range."""
        _check_index(index, len(self._items))
        del self._items[index]

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._items.reverse()


@dataclass(slots=True, eq=False)
class _SinglyNode:
    value: int
    next: Optional[_SinglyNode] = None


class LinkedList:
    """A positional list stored in a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_SinglyNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_SinglyNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def _node_at(self, index: int) -> _SinglyNode:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"Invalid index: {index}")

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        return self._node_at(index).value

    def set(self, value: int, index: int) -> None:
        """Replace the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        self._node_at(index).value = value

    def add(self, value: int) -> None:
        """Append ``value`` at the end."""
        self.insert(value, self._size)

    def insert(self, value: int, index: int) -> None:
        """Insert ``value`` at ``index`` (0 to len inclusive)."""
        _check_insert_index(index, self._size)
        if index == 0:
            self._head = _SinglyNode(value, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _SinglyNode(value, previous.next)
        self._size += 1

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        if index == 0:
            assert self._head is not None
            self._head = self._head.next
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            previous.next = previous.next.next
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the order of the values in place by relinking nodes."""
        previous: Optional[_SinglyNode] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous


@dataclass(slots=True, eq=False)
class _DoublyNode:
    value: int
    prev: Optional[_DoublyNode] = None
    next: Optional[_DoublyNode] = None


class DoublyLinkedList:
    """A positional list stored in a doubly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def _node_at(self, index: int) -> _DoublyNode:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        return self._node_at(index).value

    def set(self, value: int, index: int) -> None:
        """Replace the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        self._node_at(index).value = value

    def add(self, value: int) -> None:
        """Append ``value`` at the end."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, value: int, index: int) -> None:
        """Insert ``value`` at ``index`` (0 to len inclusive)."""
        _check_insert_index(index, self._size)
        if index == self._size:
            self.add(value)
            return
        following = self._node_at(index)
        node = _DoublyNode(value, prev=following.prev, next=following)
        if following.prev is None:
            self._head = node
        else:
            following.prev.next = node
        following.prev = node
        self._size += 1

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``; raise IndexError if out of range."""
        _check_index(index, self._size)
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the order of the values in place by swapping links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head