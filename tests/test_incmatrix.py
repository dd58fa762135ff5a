import pytest

from mstlab.edge import Edge
from mstlab.enums import GraphDirection
from mstlab.incmatrix import GraphIncMatrix


def test_new_matrix_is_zero():
    graph = GraphIncMatrix(3, 2)
    assert graph.matrix == ((0, 0), (0, 0), (0, 0))
    assert graph.vertices == 3
    assert graph.edges == 2


def test_undirected_edge_stores_weight_in_both_rows():
    graph = GraphIncMatrix(3, 1)
    graph.add_edge(0, 2, 6)
    assert [row[0] for row in graph.matrix] == [6, 0, 6]


def test_directed_edge_negates_source_row():
    graph = GraphIncMatrix(3, 1, GraphDirection.DIRECTED)
    graph.add_edge(2, 1, 6)
    assert [row[0] for row in graph.matrix] == [0, 6, -6]


def test_full_matrix_rejects_more_edges():
    graph = GraphIncMatrix(2, 1)
    graph.add_edge(0, 1, 1)
    with pytest.raises(IndexError):
        graph.add_edge(0, 1, 2)


def test_full_check_comes_before_vertex_check():
    graph = GraphIncMatrix(2, 0)
    with pytest.raises(IndexError):
        graph.add_edge(5, 5, 1)


@pytest.mark.parametrize("source, target", [(-1, 0), (0, 2), (2, 1)])
def test_out_of_bounds_vertex_rejected(source, target):
    graph = GraphIncMatrix(2, 3)
    with pytest.raises(ValueError):
        graph.add_edge(source, target, 1)


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        GraphIncMatrix(-1, 2)


def test_edge_array_round_trip_undirected():
    added = [Edge(0, 1, 1), Edge(1, 2, 3), Edge(1, 2, 2), Edge(2, 3, 4), Edge(0, 3, 1)]
    graph = GraphIncMatrix(4, len(added))
    for edge in added:
        graph.add_edge(edge.source, edge.target, edge.weight)
    assert graph.edge_array() == added


def test_edge_array_orders_endpoints_by_row():
    graph = GraphIncMatrix(3, 1)
    graph.add_edge(2, 0, 8)
    assert graph.edge_array() == [Edge(0, 2, 8)]


def test_edge_array_skips_unfilled_columns():
    graph = GraphIncMatrix(3, 4)
    graph.add_edge(0, 1, 5)
    assert graph.edge_array() == [Edge(0, 1, 5)]


def test_self_loop_edge():
    graph = GraphIncMatrix(2, 1)
    graph.add_edge(1, 1, 3)
    assert graph.edge_array() == [Edge(1, 1, 3)]


def test_matrix_copy_is_independent():
    graph = GraphIncMatrix(2, 1)
    before = graph.matrix
    graph.add_edge(0, 1, 4)
    assert before == ((0,), (0,))
    assert graph.matrix == ((4,), (4,))


def test_str_format():
    graph = GraphIncMatrix(2, 2, GraphDirection.DIRECTED)
    graph.add_edge(0, 1, 3)
    assert str(graph) == "-3 0 \n3 0 "