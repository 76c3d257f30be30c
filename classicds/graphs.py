"""Graphs stored as adjacency matrices, adjacency lists or incidence matrices."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

EDGE_WEIGHT = 1


class DuplicateEdgeError(ValueError):
    """Raised when adding an edge that the graph already holds."""


def _check_count(count: int, what: str) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{what} must be an int")
    if count < 0:
        raise ValueError(f"{what} must not be negative")
    return count


def _read_ints(path: str | os.PathLike[str]) -> list[int]:
    text = Path(path).read_text()
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"{os.fspath(path)}: expected only integers") from exc


def _split_header(
    values: list[int], header_size: int, path: str | os.PathLike[str]
) -> tuple[list[int], list[int]]:
    if len(values) < header_size:
        raise ValueError(f"{os.fspath(path)}: missing graph size")
    return values[:header_size], values[header_size:]


def _records(
    values: list[int], width: int, path: str | os.PathLike[str]
) -> Iterable[tuple[int, ...]]:
    if len(values) % width:
        raise ValueError(
            f"{os.fspath(path)}: edge lines must hold {width} integers each"
        )
    return zip(*[iter(values)] * width)


def _matrix_text(column_count: int, rows: list[list[int]]) -> str:
    lines = [
        "    " + "".join(f"{column:3d}" for column in range(column_count)),
        "    " + "---" * column_count,
    ]
    lines.extend(
        f"{index:3d}|" + "".join(f"{value:3d}" for value in row)
        for index, row in enumerate(rows)
    )
    return "\n".join(lines) + "\n"


class AdjacencyMatrixGraph:
    """A graph whose edges live in an N x N matrix of weights (0 = no edge)."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        self._n = _check_count(vertex_count, "vertex count")
        self._directed = directed
        self._matrix = [[0] * self._n for _ in range(self._n)]

    @property
    def directed(self) -> bool:
        return self._directed

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._n:
            raise IndexError(f"vertex {vertex} out of bounds")

    def add_edge(self, u: int, v: int, weight: int = EDGE_WEIGHT) -> None:
        """Add the edge ``u -> v`` (both ways unless directed)."""
        self._check_vertex(u)
        self._check_vertex(v)
        if self._matrix[u][v]:
            raise DuplicateEdgeError(f"edge ({u},{v}) already exists")
        self._matrix[u][v] = weight
        if not self._directed:
            self._matrix[v][u] = weight

    def edge_count(self) -> int:
        """Number of edges with a positive weight (self-loops not counted)."""
        if self._directed:
            return sum(
                1
                for i, row in enumerate(self._matrix)
                for j, value in enumerate(row)
                if i != j and value > 0
            )
        return sum(
            1
            for i, row in enumerate(self._matrix)
            for value in row[i + 1 :]
            if value > 0
        )

    def format(self) -> str:
        """The matrix as a table with vertex numbers along both edges."""
        return _matrix_text(self._n, self._matrix)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        weighted: bool = False,
        directed: bool = False,
    ) -> AdjacencyMatrixGraph:
        """Read ``N`` then one ``u v`` (or ``u v w`` when weighted) per edge."""
        (count,), rest = _split_header(_read_ints(path), 1, path)
        graph = cls(count, directed)
        for record in _records(rest, 3 if weighted else 2, path):
            graph.add_edge(*record)
        return graph


class AdjacencyListGraph:
    """An undirected graph keeping each vertex's neighbours in sorted order."""

    def __init__(self, vertex_count: int) -> None:
        n = _check_count(vertex_count, "vertex count")
        self._adjacency: list[dict[int, int | None]] = [{} for _ in range(n)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of bounds")

    def add_edge(self, u: int, v: int, weight: int | None = None) -> None:
        """Add the undirected edge ``u - v``, optionally carrying a weight."""
        self._check_vertex(u)
        self._check_vertex(v)
        if v in self._adjacency[u]:
            raise DuplicateEdgeError(f"edge ({u},{v}) already exists")
        self._adjacency[u][v] = weight
        self._adjacency[v][u] = weight

    def neighbors(self, vertex: int) -> list[int]:
        """The neighbours of ``vertex`` in ascending order."""
        self._check_vertex(vertex)
        return sorted(self._adjacency[vertex])

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def format(self) -> str:
        """One line per vertex: ``%2d: `` then its neighbours."""
        lines = []
        for index, edges in enumerate(self._adjacency):
            entries = "".join(
                f"{other} " if edges[other] is None else f"{other}({edges[other]}) "
                for other in sorted(edges)
            )
            lines.append(f"{index:2d}: {entries}")
        return "\n".join(lines) + "\n" if lines else ""

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], weighted: bool = False
    ) -> AdjacencyListGraph:
        """Read ``N`` then one ``u v`` (or ``u v w`` when weighted) per edge."""
        (count,), rest = _split_header(_read_ints(path), 1, path)
        graph = cls(count)
        for record in _records(rest, 3 if weighted else 2, path):
            graph.add_edge(*record)
        return graph


class IncidenceMatrixGraph:
    """A graph as an N x M matrix: column k marks the two ends of edge k."""

    def __init__(self, vertex_count: int, edge_count: int) -> None:
        self._n = _check_count(vertex_count, "vertex count")
        self._m = _check_count(edge_count, "edge count")
        self._matrix = [[0] * self._m for _ in range(self._n)]
        self._used = 0

    def add_edge(self, u: int, v: int) -> int:
        """Fill the next free column with edge ``u - v`` and return its index."""
        for vertex in (u, v):
            if not 0 <= vertex < self._n:
                raise IndexError(f"vertex {vertex} out of bounds")
        if self._used >= self._m:
            raise OverflowError("no room for more edges")
        column = self._used
        self._matrix[u][column] = 1
        self._matrix[v][column] = 1
        self._used += 1
        return column

    def format(self) -> str:
        """The matrix with edge numbers across and vertex numbers down."""
        return _matrix_text(self._m, self._matrix)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> IncidenceMatrixGraph:
        """Read ``N M`` then one ``u v`` pair per edge."""
        (vertices, edges), rest = _split_header(_read_ints(path), 2, path)
        graph = cls(vertices, edges)
        for u, v in _records(rest, 2, path):
            graph.add_edge(u, v)
        return graph