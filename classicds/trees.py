"""Binary trees built node by node, and binary search trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BinaryTree:
    """A binary tree whose shape is set by explicit insertions."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def is_empty(self) -> bool:
        return self.root is None

    def insert_root(self, item: Any) -> TreeNode:
        """Create the root node; the tree must be empty."""
        if self.root is not None:
            raise ValueError("tree already has a root")
        self.root = TreeNode(item)
        return self.root

    def insert_left(self, node: TreeNode, item: Any) -> TreeNode:
        """Give ``node`` a new left child; it must not have one already."""
        if node.left is not None:
            raise ValueError("node already has a left child")
        node.left = TreeNode(item)
        return node.left

    def insert_right(self, node: TreeNode, item: Any) -> TreeNode:
        """Give ``node`` a new right child; it must not have one already."""
        if node.right is not None:
            raise ValueError("node already has a right child")
        node.right = TreeNode(item)
        return node.right

    def delete_root(self) -> Any:
        """Remove a childless root and return its data."""
        if self.root is None:
            raise IndexError("tree is empty")
        if not self.root.is_leaf():
            raise ValueError("root has children")
        data = self.root.data
        self.root = None
        return data

    def delete_left(self, node: TreeNode) -> Any:
        """Remove the childless left child of ``node`` and return its data."""
        child = node.left
        if child is None:
            raise IndexError("node has no left child")
        if not child.is_leaf():
            raise ValueError("left child has children")
        node.left = None
        return child.data

    def delete_right(self, node: TreeNode) -> Any:
        """Remove the childless right child of ``node`` and return its data."""
        child = node.right
        if child is None:
            raise IndexError("node has no right child")
        if not child.is_leaf():
            raise ValueError("right child has children")
        node.right = None
        return child.data

    def preorder(self) -> Iterator[Any]:
        """Yield node data: node, left subtree, right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield node data: left subtree, node, right subtree."""
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.data
            current = node.right

    def postorder(self) -> Iterator[Any]:
        """Yield node data: left subtree, right subtree, node."""
        output: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            output.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(output)


class BinarySearchTree(BinaryTree):
    """A binary tree kept ordered: smaller items left, larger items right."""

    def insert(self, item: Any) -> bool:
        """Insert ``item``; return False if it is already present."""
        if self.root is None:
            self.insert_root(item)
            return True
        current = self.root
        while True:
            if item == current.data:
                return False
            if item < current.data:
                if current.left is None:
                    self.insert_left(current, item)
                    return True
                current = current.left
            else:
                if current.right is None:
                    self.insert_right(current, item)
                    return True
                current = current.right

    def delete(self, item: Any) -> None:
        """Remove ``item``; raise KeyError if it is not in the tree.

        A node with two children takes the value of its in-order successor,
        which is then unlinked.
        """
        parent: TreeNode | None = None
        went_left = False
        current = self.root
        while current is not None and item != current.data:
            parent = current
            went_left = item < current.data
            current = current.left if went_left else current.right
        if current is None:
            raise KeyError(item)

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.data = successor.data
            if successor_parent is current:
                current.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif went_left:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, item: Any) -> bool:
        current = self.root
        while current is not None:
            if item == current.data:
                return True
            current = current.left if item < current.data else current.right
        return False