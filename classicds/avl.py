"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """One node of an AVL tree; ``height`` is that of the subtree it roots."""

    data: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    """Refresh the height of ``node`` and rotate if it leans by two."""
    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance == 2:
        left = node.left
        assert left is not None
        if _height(left.left) < _height(left.right):
            node.left = _rotate_left(left)
        return _rotate_right(node)
    if balance == -2:
        right = node.right
        assert right is not None
        if _height(right.right) < _height(right.left):
            node.right = _rotate_right(right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, item: Any) -> tuple[AVLNode, bool]:
    if node is None:
        return AVLNode(item), True
    if item < node.data:
        node.left, added = _insert(node.left, item)
    elif item > node.data:
        node.right, added = _insert(node.right, item)
    else:
        return node, False
    return _rebalance(node), added


def _delete(node: AVLNode | None, item: Any) -> AVLNode | None:
    if node is None:
        raise KeyError(item)
    if item < node.data:
        node.left = _delete(node.left, item)
    elif item > node.data:
        node.right = _delete(node.right, item)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return _rebalance(node)


def _format(node: AVLNode) -> str:
    parts = []
    if node.left is not None:
        parts.append(f"({_format(node.left)})")
    parts.append(f" {node.data} ")
    if node.right is not None:
        parts.append(f"({_format(node.right)})")
    return "".join(parts)


class AVLTree:
    """A binary search tree kept height-balanced by rotations."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, item: Any) -> bool:
        """Insert ``item``; return False if it is already present."""
        self.root, added = _insert(self.root, item)
        return added

    def delete(self, item: Any) -> None:
        """Remove ``item``; raise KeyError if it is not in the tree.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        self.root = _delete(self.root, item)

    def __contains__(self, item: Any) -> bool:
        current = self.root
        while current is not None:
            if item == current.data:
                return True
            current = current.left if item < current.data else current.right
        return False

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def inorder(self) -> Iterator[Any]:
        """Yield the items in ascending order."""
        stack: list[AVLNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.data
            current = node.right

    def format(self) -> str:
        """Nested form: ``(left) value (right)``, value as `` %d ``."""
        return "" if self.root is None else _format(self.root)