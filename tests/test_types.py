"""Tests for the Graph and DiGraph types."""

from __future__ import annotations

import numpy as np
import pytest

from lrplanarity import (
    DiGraph,
    Graph,
    GraphStructureWarning,
    InvalidEdgeError,
    InvalidGraphError,
)


class TestGraph:
    """Tests for the undirected graph."""

    def test_construction(self):
        """Vertices and edges are set up from constructor arguments."""
        g = Graph(3, [(0, 1), (1, 2)])
        assert g.num_nodes == 3
        assert g.num_edges == 2
        assert list(g.nodes()) == [0, 1, 2]
        assert not g.is_directed

    def test_empty_graph(self):
        g = Graph()
        assert g.num_nodes == 0
        assert g.num_edges == 0
        assert list(g.edges()) == []

    def test_negative_num_nodes_raises(self):
        with pytest.raises(InvalidGraphError, match="num_nodes must be >= 0"):
            Graph(-1)

    def test_out_of_range_edge_raises(self):
        with pytest.raises(InvalidEdgeError, match="out of bounds"):
            Graph(2, [(0, 2)])

    def test_duplicate_edge_warns(self):
        """Repeated edges (in either direction) are ignored with a warning."""
        with pytest.warns(GraphStructureWarning, match="Duplicate edge"):
            g = Graph(3, [(0, 1), (1, 0), (1, 2)])
        assert g.num_edges == 2

    def test_edges_canonical_order(self):
        """Edges are yielded once, as (min, max), by source then insertion."""
        g = Graph(4, [(2, 0), (3, 1), (1, 0), (0, 3)])
        assert list(g.edges()) == [(0, 2), (0, 1), (0, 3), (1, 3)]

    def test_neighbors_and_degree(self):
        g = Graph(3, [(0, 1), (0, 2)])
        assert g.neighbors(0) == [1, 2]
        assert g.neighbors(1) == [0]
        assert g.degree(0) == 2

    def test_neighbors_returns_copy(self):
        g = Graph(2, [(0, 1)])
        g.neighbors(0).append(5)
        assert g.neighbors(0) == [1]

    def test_neighbors_invalid_vertex(self):
        with pytest.raises(InvalidEdgeError):
            Graph(2).neighbors(2)

    def test_has_edge_symmetric(self):
        g = Graph(3, [(0, 1)])
        assert g.has_edge(0, 1)
        assert g.has_edge(1, 0)
        assert not g.has_edge(1, 2)

    def test_self_loop(self):
        """Self-loops are stored once."""
        g = Graph(2, [(0, 0), (0, 1)])
        assert g.num_edges == 2
        assert g.neighbors(0) == [0, 1]
        assert list(g.edges()) == [(0, 0), (0, 1)]

    def test_add_edge_returns_false_if_present(self):
        g = Graph(2)
        assert g.add_edge(0, 1) is True
        assert g.add_edge(1, 0) is False
        assert g.num_edges == 1

    def test_remove_edge(self):
        g = Graph(3, [(0, 1), (1, 2), (1, 1)])
        assert g.remove_edge(1, 0) is True
        assert g.remove_edge(1, 0) is False
        assert g.remove_edge(1, 1) is True
        assert g.neighbors(1) == [2]
        assert g.num_edges == 1

    def test_add_node(self):
        g = Graph(2)
        assert g.add_node() == 2
        g.add_edge(2, 0)
        assert g.num_nodes == 3
        assert g.has_edge(0, 2)

    def test_weights(self):
        g = Graph(3)
        g.add_edge(0, 1, weight=2.5)
        g.add_edge(1, 2)
        assert g.weight(1, 0) == 2.5
        assert g.weight(1, 2) == 1.0
        with pytest.raises(KeyError):
            g.weight(0, 2)

    def test_weight_matrix(self):
        g = Graph(3)
        g.add_edge(0, 1, weight=2.5)
        g.add_edge(1, 2)
        expected = np.array([[0.0, 2.5, 0.0], [2.5, 0.0, 1.0], [0.0, 1.0, 0.0]])
        np.testing.assert_array_equal(g.weight_matrix(), expected)

    def test_copy_is_independent(self):
        g = Graph(3, [(0, 1)])
        g.add_edge(1, 2, weight=4.0)
        h = g.copy()
        h.remove_edge(0, 1)
        assert g.has_edge(0, 1)
        assert h.weight(1, 2) == 4.0
        assert type(h) is Graph

    def test_simple_copy_drops_self_loops(self):
        g = Graph(3, [(0, 0), (0, 1), (2, 2)])
        s = g.simple_copy()
        assert list(s.edges()) == [(0, 1)]
        assert g.num_edges == 3

    def test_repr(self):
        assert repr(Graph(3, [(0, 1)])) == "Graph(num_nodes=3, num_edges=1)"


class TestDiGraph:
    """Tests for the directed graph."""

    def test_arcs_are_directed(self):
        g = DiGraph(3, [(0, 1), (2, 1)])
        assert g.is_directed
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)
        assert g.neighbors(0) == [1]
        assert g.predecessors(1) == [0, 2]
        assert g.degree(1) == 2

    def test_antiparallel_arcs_allowed(self):
        g = DiGraph(2, [(0, 1), (1, 0)])
        assert g.num_edges == 2
        assert list(g.edges()) == [(0, 1), (1, 0)]

    def test_duplicate_arc_warns(self):
        with pytest.warns(GraphStructureWarning):
            g = DiGraph(2, [(0, 1), (0, 1)])
        assert g.num_edges == 1

    def test_remove_edge(self):
        g = DiGraph(2, [(0, 1), (1, 0)])
        assert g.remove_edge(0, 1)
        assert g.predecessors(1) == []
        assert g.has_edge(1, 0)

    def test_add_node(self):
        g = DiGraph(1)
        v = g.add_node()
        g.add_edge(0, v)
        assert g.predecessors(v) == [0]

    def test_to_undirected(self):
        g = DiGraph(3, [(0, 1), (1, 0), (1, 2), (2, 2)])
        u = g.to_undirected()
        assert not u.is_directed
        assert list(u.edges()) == [(0, 1), (1, 2), (2, 2)]

    def test_simple_copy_is_skeleton(self):
        g = DiGraph(3, [(1, 0), (0, 1), (2, 2)])
        s = g.simple_copy()
        assert type(s) is Graph
        assert list(s.edges()) == [(0, 1)]

    def test_weight_matrix_directed(self):
        g = DiGraph(2)
        g.add_edge(0, 1, weight=3.0)
        np.testing.assert_array_equal(g.weight_matrix(), np.array([[0.0, 3.0], [0.0, 0.0]]))

    def test_copy(self):
        g = DiGraph(2, [(0, 1)])
        h = g.copy()
        assert type(h) is DiGraph
        assert h.predecessors(1) == [0]
        h.remove_edge(0, 1)
        assert g.has_edge(0, 1)
