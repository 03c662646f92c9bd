"""An unbalanced binary search tree of integers without duplicates."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


_PRE = ("node", "left", "right")
_IN = ("left", "node", "right")
_POST = ("left", "right", "node")


class BinarySearchTree:
    """A binary search tree; adding a value already present does nothing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.add(value)

    def add(self, value: int) -> None:
        """Insert ``value`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while value != node.value:
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(value))
                return
            node = child

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value <= node.value else node.right  # type: ignore[operator]
        return False

    def _extreme(self, side: str) -> int:
        if self._root is None:
            raise ValueError("the tree is empty")
        node = self._root
        while getattr(node, side) is not None:
            node = getattr(node, side)
        return node.value

    def min(self) -> int:
        """Return the smallest value; raise ValueError when empty."""
        return self._extreme("left")

    def max(self) -> int:
        """Return the largest value; raise ValueError when empty."""
        return self._extreme("right")

    def _depth_first(self, order: tuple[str, str, str]) -> list[int]:
        result: list[int] = []
        pending: list[tuple[Optional[_Node], bool]] = [(self._root, False)]
        while pending:
            node, ready = pending.pop()
            if node is None:
                continue
            if ready:
                result.append(node.value)
                continue
            parts = {
                "node": (node, True),
                "left": (node.left, False),
                "right": (node.right, False),
            }
            pending.extend(parts[key] for key in reversed(order))
        return result

    def preorder(self) -> list[int]:
        """Return values in root, left, right order."""
        return self._depth_first(_PRE)

    def inorder(self) -> list[int]:
        """Return values in left, root, right order."""
        return self._depth_first(_IN)

    def postorder(self) -> list[int]:
        """Return values in left, right, root order."""
        return self._depth_first(_POST)

    def _nodes(self) -> Iterator[_Node]:
        queue = deque([self._root] if self._root else [])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(child for child in (node.left, node.right) if child)

    def level_order(self) -> list[int]:
        """Return values breadth first, left to right."""
        return [node.value for node in self._nodes()]

    def height(self) -> int:
        """Return the number of edges on the longest path; -1 when empty."""
        height = -1
        level = [self._root] if self._root else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def remove(self, value: int) -> None:
        """Remove ``value`` if present, replacing it by its in-order successor."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def is_bst(self) -> bool:
        """Check that every node is ordered with respect to its children."""
        return all(
            (node.left is None or node.left.value <= node.value)
            and (node.right is None or node.right.value >= node.value)
            for node in self._nodes()
        )

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())


def balanced_from_sorted(values: Sequence[int]) -> BinarySearchTree:
    """Build a height-balanced tree from an ascending sequence."""

    def build(low: int, high: int) -> Optional[_Node]:
        if low > high:
            return None
        mid = (low + high) // 2
        return _Node(values[mid], build(low, mid - 1), build(mid + 1, high))

    tree = BinarySearchTree()
    tree._root = build(0, len(values) - 1)
    return tree


def _spaced(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the binary search tree."""
    argparse.ArgumentParser(description="Binary search tree demonstration.").parse_args(argv)

    tree = BinarySearchTree([50, 30, 45, 32, 10, 90, 55, 49, -5, 88, 110, 40])
    for probe in (-1, 49):
        print("Procurando valor que nao existe", str(probe in tree).lower())
    print("O valor minimo é: ", tree.min())
    print("O valor maximo é: ", tree.max())

    print()
    traversals = [
        ("Pre-ordem: ", tree.preorder()),
        ("In-ordem:  ", tree.inorder()),
        ("Pos-ordem: ", tree.postorder()),
        ("Em nível:  ", tree.level_order()),
    ]
    for label, values in traversals:
        print(label + _spaced(values))
    print("A altura da árvore é: ", tree.height())
    print("A BST tem tamanho(antes de remover): ", len(tree))
    tree.remove(45)
    print("É uma BST: ", str(tree.is_bst()).lower())
    print("A BST tem tamanho(pós remover um elemento): ", len(tree))

    print("\n\nConvertendo vetor em BST balanceada")
    balanced = balanced_from_sorted(list(range(1, 11)))
    print("Navegaçao em nivel:  " + _spaced(balanced.level_order()))
    return 0