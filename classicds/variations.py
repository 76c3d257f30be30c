"""Doubly linked and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One node of a doubly linked list."""

    data: Any
    next: DoublyNode | None = None
    prev: DoublyNode | None = None


class DoublyLinkedList:
    """A linked list whose nodes point both forward and backward."""

    def __init__(self) -> None:
        self.head: DoublyNode | None = None

    def insert_first(self, item: Any) -> DoublyNode:
        """Insert ``item`` at the front and return its node."""
        node = DoublyNode(item, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return node

    def insert_after(self, node: DoublyNode, item: Any) -> DoublyNode:
        """Insert ``item`` right after ``node`` and return its node."""
        new = DoublyNode(item, next=node.next, prev=node)
        if node.next is not None:
            node.next.prev = new
        node.next = new
        return new

    def delete_first(self) -> Any:
        """Remove the first node and return its data."""
        if self.head is None:
            raise IndexError("delete from empty list")
        removed = self.head
        self.head = removed.next
        if self.head is not None:
            self.head.prev = None
        return removed.data

    def delete_after(self, node: DoublyNode) -> Any:
        """Remove the node following ``node`` and return its data."""
        removed = node.next
        if removed is None:
            raise IndexError("no node after the given node")
        node.next = removed.next
        if removed.next is not None:
            removed.next.prev = node
        return removed.data

    def is_empty(self) -> bool:
        return self.head is None

    def nodes(self) -> Iterator[DoublyNode]:
        """Yield the nodes from head to tail."""
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        """Yield the data from tail to head, following the back links."""
        tail = None
        for tail in self.nodes():
            pass
        current = tail
        while current is not None:
            yield current.data
            current = current.prev

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())


@dataclass(eq=False)
class CircularNode:
    """One node of a circular singly linked list."""

    data: Any
    next: CircularNode | None = None


class CircularList:
    """A singly linked list whose last node points back to the head."""

    def __init__(self) -> None:
        self.head: CircularNode | None = None

    def _last(self) -> CircularNode:
        assert self.head is not None
        last = self.head
        while last.next is not self.head:
            last = last.next
        return last

    def insert_first(self, item: Any) -> CircularNode:
        """Insert ``item`` at the front and return its node."""
        node = CircularNode(item)
        if self.head is None:
            node.next = node
        else:
            self._last().next = node
            node.next = self.head
        self.head = node
        return node

    def insert_after(self, node: CircularNode, item: Any) -> CircularNode:
        """Insert ``item`` right after ``node`` and return its node."""
        new = CircularNode(item, node.next)
        node.next = new
        return new

    def delete_first(self) -> Any:
        """Remove the head node and return its data."""
        head = self.head
        if head is None:
            raise IndexError("delete from empty list")
        if head.next is head:
            self.head = None
            return head.data
        last = self._last()
        last.next = head.next
        self.head = head.next
        return head.data

    def delete_node(self, node: CircularNode) -> Any:
        """Remove ``node`` itself from the list and return its data."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if node is self.head:
            return self.delete_first()
        previous = self.head
        while previous.next is not node:
            previous = previous.next
            if previous is self.head:
                raise ValueError("node is not in this list")
        previous.next = node.next
        return node.data

    def get(self, n: int) -> Any:
        """Return the ``n``-th item (1-based), wrapping round the circle."""
        if n <= 0:
            raise IndexError("position must be positive")
        if self.head is None:
            raise IndexError("get from empty list")
        count = len(self)
        position = (n - 1) % count
        for index, item in enumerate(self):
            if index == position:
                return item
        raise AssertionError("unreachable")

    def is_empty(self) -> bool:
        return self.head is None

    def nodes(self) -> Iterator[CircularNode]:
        """Yield each node once, starting at the head."""
        if self.head is None:
            return
        current = self.head
        while True:
            yield current
            current = current.next
            if current is self.head:
                return

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())