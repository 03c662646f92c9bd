"""A self-balancing AVL tree of integers that allows duplicates."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 0
    balance: int = 0


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    left, right = _height(node.left), _height(node.right)
    node.balance = right - left
    node.height = max(left, right) + 1


def _rotate_right(node: _Node) -> _Node:
    new_root = node.left
    assert new_root is not None
    node.left = new_root.right
    new_root.right = node
    _update(node)
    _update(new_root)
    return new_root


def _rotate_left(node: _Node) -> _Node:
    new_root = node.right
    assert new_root is not None
    node.right = new_root.left
    new_root.left = node
    _update(node)
    _update(new_root)
    return new_root


def _rebalance(node: _Node) -> _Node:
    if node.balance == -2:
        assert node.left is not None
        if node.left.balance == 1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if node.balance == 2:
        assert node.right is not None
        if node.right.balance == -1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _add(node: Optional[_Node], value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value <= node.value:
        node.left = _add(node.left, value)
    else:
        node.right = _add(node.right, value)
    _update(node)
    return _rebalance(node)


def _max_value(node: _Node) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node: Optional[_Node], value: int) -> Optional[_Node]:
    if node is None:
        return None
    if value == node.value:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        largest = _max_value(node.left)
        node.value = largest
        node.left = _remove(node.left, largest)
    elif value < node.value:
        node.left = _remove(node.left, value)
    else:
        node.right = _remove(node.right, value)
    _update(node)
    return _rebalance(node)


class AVLTree:
    """An AVL tree; equal values are kept and go to the left on insertion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.add(value)

    def add(self, value: int) -> None:
        """Insert ``value`` and rebalance."""
        self._root = _add(self._root, value)
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value`` if present and rebalance."""
        if value not in self:
            return
        self._root = _remove(self._root, value)
        self._size -= 1

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._root

    def min(self) -> int:
        """Return the smallest value; raise ValueError when empty."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> int:
        """Return the largest value; raise ValueError when empty."""
        return _max_value(self._require_root())

    def level_order(self) -> list[int]:
        """Return values breadth first, left to right."""
        result: list[int] = []
        queue = deque([self._root] if self._root else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Return the number of edges on the longest path; -1 when empty."""
        return _height(self._root)

    def is_avl(self) -> bool:
        """Check that every node's balance factor lies between -1 and 1."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            if not -1 <= node.balance <= 1:
                return False
            stack.extend(child for child in (node.left, node.right) if child)
        return True

    def __len__(self) -> int:
        return self._size


def main(argv: Optional[list[str]] = None) -> int:
    """Build a small AVL tree and print it level by level."""
    argparse.ArgumentParser(description="AVL tree demonstration.").parse_args(argv)
    tree = AVLTree([20, 8, 1, 9, 19, 11])
    print("".join(f"{value} " for value in tree.level_order()))
    return 0