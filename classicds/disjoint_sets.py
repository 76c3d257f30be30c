"""Disjoint sets as linked member lists or as a ranked forest."""

from __future__ import annotations

from typing import Protocol


class _Graph(Protocol):
    def vertex_count(self) -> int: ...

    def neighbors(self, vertex: int) -> list[int]: ...


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError("size must be an int")
    if size < 0:
        raise ValueError("size must not be negative")
    return size


class ListDisjointSets:
    """Each set is a member list; every element records its representative."""

    def __init__(self, size: int) -> None:
        n = _check_size(size)
        self._repr = list(range(n))
        self._members: dict[int, list[int]] = {i: [i] for i in range(n)}

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._repr):
            raise IndexError(f"element {x} out of range")

    def union(self, x: int, y: int) -> bool:
        """Append y's set to x's set; return False if they are already one."""
        self._check(x)
        self._check(y)
        rx, ry = self._repr[x], self._repr[y]
        if rx == ry:
            return False
        moved = self._members.pop(ry)
        self._members[rx].extend(moved)
        for member in moved:
            self._repr[member] = rx
        return True

    def find(self, x: int) -> int:
        """The representative of the set holding ``x``."""
        self._check(x)
        return self._repr[x]

    def groups(self) -> list[list[int]]:
        """Each set once, in member-list order, by first element seen."""
        seen: set[int] = set()
        result = []
        for x in range(len(self._repr)):
            if x in seen:
                continue
            members = list(self._members[self._repr[x]])
            seen.update(members)
            result.append(members)
        return result

    def format(self) -> str:
        """One ``{ a b ... }`` line per set."""
        return "".join(
            "{ " + "".join(f"{m} " for m in group) + "}\n" for group in self.groups()
        )

    def __len__(self) -> int:
        return len(self._repr)


class ForestDisjointSets:
    """Sets as trees joined by height, with path compression on find."""

    def __init__(self, size: int) -> None:
        n = _check_size(size)
        self._parent = list(range(n))
        self._height = [0] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def union(self, x: int, y: int) -> bool:
        """Join the sets of x and y; return False if they are already one."""
        p1 = self.find(x)
        p2 = self.find(y)
        if p1 == p2:
            return False
        if self._height[p1] < self._height[p2]:
            self._parent[p1] = p2
        elif self._height[p1] > self._height[p2]:
            self._parent[p2] = p1
        else:
            self._parent[p2] = p1
            self._height[p1] += 1
        return True

    def _root(self, x: int) -> int:
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def find(self, x: int) -> int:
        """The root of x's tree; every node on the path is relinked to it."""
        self._check(x)
        root = self._root(x)
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def parent(self, x: int) -> int:
        """The current parent of ``x`` in its tree."""
        self._check(x)
        return self._parent[x]

    def groups(self) -> list[list[int]]:
        """Each set once, members ascending, ordered by smallest member."""
        by_root: dict[int, list[int]] = {}
        for x in range(len(self._parent)):
            by_root.setdefault(self._root(x), []).append(x)
        return list(by_root.values())

    def format(self) -> str:
        """Each set as ``{ x(parent) ... } `` on a single line."""
        return "".join(
            "{ " + "".join(f"{m}({self._parent[m]}) " for m in group) + "} "
            for group in self.groups()
        )

    def __len__(self) -> int:
        return len(self._parent)


def connected_components(graph: _Graph) -> ListDisjointSets:
    """Disjoint sets of the graph's vertices, one set per connected component."""
    sets = ListDisjointSets(graph.vertex_count())
    for vertex in range(graph.vertex_count()):
        for neighbor in graph.neighbors(vertex):
            sets.union(vertex, neighbor)
    return sets