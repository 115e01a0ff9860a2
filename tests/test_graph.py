import numpy as np
import pytest

from euclidean_tsp.errors import BadVertexError
from euclidean_tsp.geometry import euclidean_distance, points_from_coordinates
from euclidean_tsp.graph import Edge, WeightedGraph


def test_matrix_is_symmetric_with_zero_diagonal(small_graph):
    weights = small_graph.weights
    assert weights.shape == (7, 7)
    assert np.array_equal(weights, weights.T)
    assert np.all(np.diag(weights) == 0)


def test_weights_match_rounded_distances(small_graph):
    points = small_graph.points
    for i in range(small_graph.n):
        for j in range(small_graph.n):
            assert small_graph.weight(i, j) == euclidean_distance(points[i], points[j])


def test_one_edge_per_unordered_pair(small_graph):
    n = small_graph.n
    edges = small_graph.edges
    assert len(edges) == n * (n - 1) // 2
    assert {(e.row, e.col) for e in edges} == {(i, j) for i in range(n) for j in range(i + 1, n)}
    for e in edges:
        assert e.weight == small_graph.weight(e.row, e.col)


def test_every_vertex_sees_all_incident_edges(small_graph):
    for v in range(small_graph.n):
        incident = small_graph.incident_edges(v)
        assert len(incident) == small_graph.n - 1
        assert all(e.can_follow(v) for e in incident)


def test_same_points_give_identical_edges():
    a = WeightedGraph.from_seed(9, 4)
    b = WeightedGraph.from_seed(9, 4)
    assert a.edges == b.edges
    assert np.array_equal(a.weights, b.weights)


def test_weight_matrix_is_read_only(small_graph):
    with pytest.raises(ValueError):
        small_graph.weights[0, 1] = 1.0


def test_points_must_be_numbered_in_order():
    points = points_from_coordinates([(0, 0), (1, 1)])
    with pytest.raises(AssertionError):
        WeightedGraph(list(reversed(points)))


def test_follow_returns_other_end_and_records_parent(small_graph):
    scratch = small_graph.new_scratch()
    edge = Edge(2, 5, 1.0)
    assert edge.follow(2, scratch) == 5
    assert scratch.parent[5] == 2
    assert edge.follow(5, scratch) == 2
    assert scratch.parent[2] == 5


def test_follow_from_foreign_vertex_raises():
    edge = Edge(0, 1, 1.0)
    with pytest.raises(BadVertexError):
        edge.follow(3)
    assert not edge.can_follow(3)


def test_is_smaller_breaks_ties_by_row_then_col():
    base = Edge(2, 3, 1.5)
    assert base.is_smaller(Edge(4, 5, 1.0))
    assert not base.is_smaller(Edge(0, 1, 2.0))
    assert base.is_smaller(Edge(1, 3, 1.5))
    assert base.is_smaller(Edge(2, 2, 1.5))
    assert not base.is_smaller(Edge(2, 4, 1.5))
    assert not base.is_smaller(Edge(2, 3, 1.5))


def test_empty_and_single_graphs():
    assert WeightedGraph([]).n == 0
    single = WeightedGraph.from_seed(1, 0)
    assert single.edges == ()
    assert single.weights.shape == (1, 1)
