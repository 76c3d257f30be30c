import pytest

from classicds.graphs import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    DuplicateEdgeError,
    IncidenceMatrixGraph,
)


def _rows(text):
    """Matrix rows of a formatted table as lists of ints."""
    return [[int(x) for x in line.split("|")[1].split()] for line in text.splitlines()[2:]]


def test_matrix_format_pinned():
    graph = AdjacencyMatrixGraph(3)
    graph.add_edge(0, 1)
    assert graph.format() == (
        "      0  1  2\n"
        "    ---------\n"
        "  0|  0  1  0\n"
        "  1|  1  0  0\n"
        "  2|  0  0  0\n"
    )


def test_undirected_matrix_is_symmetric():
    graph = AdjacencyMatrixGraph(5)
    edges = [(0, 1), (1, 2), (3, 4), (0, 4)]
    for u, v in edges:
        graph.add_edge(u, v)
    rows = _rows(graph.format())
    assert rows == [list(col) for col in zip(*rows)]
    assert graph.edge_count() == len(edges)


def test_directed_matrix_sets_one_direction():
    graph = AdjacencyMatrixGraph(3, directed=True)
    graph.add_edge(0, 2)
    rows = _rows(graph.format())
    assert rows[0][2] == 1
    assert rows[2][0] == 0
    assert graph.edge_count() == 1


def test_weighted_matrix_stores_weight():
    graph = AdjacencyMatrixGraph(4)
    graph.add_edge(1, 3, 7)
    rows = _rows(graph.format())
    assert rows[1][3] == 7
    assert rows[3][1] == 7


def test_matrix_duplicate_edge():
    graph = AdjacencyMatrixGraph(3)
    graph.add_edge(0, 1)
    with pytest.raises(DuplicateEdgeError):
        graph.add_edge(1, 0)


@pytest.mark.parametrize("u,v", [(-1, 0), (0, 3), (3, 3)])
def test_matrix_out_of_bounds(u, v):
    with pytest.raises(IndexError):
        AdjacencyMatrixGraph(3).add_edge(u, v)


def test_matrix_from_file(tmp_path):
    path = tmp_path / "graph1.graph"
    path.write_text("4\n0 1\n1 2\n2 3\n")
    graph = AdjacencyMatrixGraph.from_file(path)
    assert graph.edge_count() == 3
    rows = _rows(graph.format())
    assert rows[2][3] == rows[3][2] == 1


def test_matrix_from_file_weighted(tmp_path):
    path = tmp_path / "w.graph"
    path.write_text("3\n0 1 4\n1 2 9\n")
    graph = AdjacencyMatrixGraph.from_file(path, weighted=True)
    rows = _rows(graph.format())
    assert rows[0][1] == 4
    assert rows[2][1] == 9


def test_matrix_from_file_incomplete_record(tmp_path):
    path = tmp_path / "bad.graph"
    path.write_text("3\n0 1\n2\n")
    with pytest.raises(ValueError):
        AdjacencyMatrixGraph.from_file(path)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        AdjacencyMatrixGraph(-1)


def test_list_neighbors_sorted_and_symmetric():
    graph = AdjacencyListGraph(6)
    for v in (5, 1, 3, 2):
        graph.add_edge(4, v)
    assert graph.neighbors(4) == sorted([5, 1, 3, 2])
    for v in (5, 1, 3, 2):
        assert graph.neighbors(v) == [4]
    assert graph.neighbors(0) == []
    assert graph.vertex_count() == 6


def test_list_format_pinned():
    graph = AdjacencyListGraph(3)
    graph.add_edge(0, 2)
    graph.add_edge(0, 1)
    assert graph.format() == " 0: 1 2 \n 1: 0 \n 2: 0 \n"


def test_list_weighted_format():
    graph = AdjacencyListGraph(2)
    graph.add_edge(0, 1, 3)
    assert graph.format().splitlines()[0] == " 0: 1(3) "


def test_list_duplicate_edge():
    graph = AdjacencyListGraph(3)
    graph.add_edge(0, 1)
    with pytest.raises(DuplicateEdgeError):
        graph.add_edge(1, 0)
    assert graph.neighbors(0) == [1]


def test_list_out_of_bounds():
    graph = AdjacencyListGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.neighbors(5)


def test_list_from_file(tmp_path):
    path = tmp_path / "graph1.graph"
    path.write_text("5\n0 4\n4 2\n4 1\n")
    graph = AdjacencyListGraph.from_file(path)
    assert graph.vertex_count() == 5
    assert graph.neighbors(4) == [0, 1, 2]


def test_list_from_file_weighted(tmp_path):
    path = tmp_path / "w.graph"
    path.write_text("3 0 1 2 1 2 6")
    graph = AdjacencyListGraph.from_file(path, weighted=True)
    assert graph.neighbors(1) == [0, 2]
    assert graph.format().splitlines()[1] == " 1: 0(2) 2(6) "


def test_list_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        AdjacencyListGraph.from_file(tmp_path / "missing.graph")


def test_incidence_columns_mark_both_ends():
    graph = IncidenceMatrixGraph(4, 2)
    assert graph.add_edge(0, 3) == 0
    assert graph.add_edge(1, 2) == 1
    rows = _rows(graph.format())
    columns = list(zip(*rows))
    assert columns[0] == (1, 0, 0, 1)
    assert columns[1] == (0, 1, 1, 0)


def test_incidence_overflow():
    graph = IncidenceMatrixGraph(2, 1)
    graph.add_edge(0, 1)
    with pytest.raises(OverflowError):
        graph.add_edge(0, 1)


def test_incidence_from_file(tmp_path):
    path = tmp_path / "graph2.graph"
    path.write_text("3 3\n0 1\n1 2\n0 2\n")
    graph = IncidenceMatrixGraph.from_file(path)
    text = graph.format()
    header = text.splitlines()[0].split()
    assert header == ["0", "1", "2"]
    for column in zip(*_rows(text)):
        assert sum(column) == 2


def test_incidence_from_file_missing_header(tmp_path):
    path = tmp_path / "bad.graph"
    path.write_text("3")
    with pytest.raises(ValueError):
        IncidenceMatrixGraph.from_file(path)