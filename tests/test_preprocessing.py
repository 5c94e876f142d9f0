"""Tests for graph preprocessing utilities."""

from lrplanarity import DiGraph, Graph, connected_components, is_connected


class TestConnectedComponents:
    """Tests for connected component detection."""

    def test_single_component(self):
        """Connected graph should have one component."""
        components = connected_components(Graph(3, [(0, 1), (1, 2)]))
        assert len(components) == 1
        assert set(components[0]) == {0, 1, 2}

    def test_multiple_components(self):
        """Disconnected graph should have multiple components."""
        components = connected_components(Graph(4, [(0, 1), (2, 3)]))
        assert len(components) == 2

    def test_isolated_nodes(self):
        """Isolated nodes should be separate components."""
        components = connected_components(Graph(3))
        assert components == [[0], [1], [2]]

    def test_bfs_order(self):
        components = connected_components(Graph(4, [(0, 2), (2, 3), (0, 1)]))
        assert components == [[0, 2, 1, 3]]

    def test_components_ordered_by_smallest_vertex(self):
        components = connected_components(Graph(5, [(4, 1), (3, 0)]))
        assert [min(c) for c in components] == [0, 1, 2]

    def test_self_loop(self):
        components = connected_components(Graph(2, [(0, 0)]))
        assert components == [[0], [1]]

    def test_directed_weak_components(self):
        """Arcs connect vertices regardless of direction."""
        components = connected_components(DiGraph(3, [(1, 0), (2, 1)]))
        assert len(components) == 1

    def test_empty_graph(self):
        assert connected_components(Graph(0)) == []


class TestIsConnected:
    """Tests for the connectivity check."""

    def test_connected(self):
        assert is_connected(Graph(3, [(0, 1), (1, 2)])) is True

    def test_disconnected(self):
        assert is_connected(Graph(3, [(0, 1)])) is False

    def test_trivial_graphs(self):
        assert is_connected(Graph(0))
        assert is_connected(Graph(1))

    def test_two_isolated_vertices(self):
        assert not is_connected(Graph(2))
