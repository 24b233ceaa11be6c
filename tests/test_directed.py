"""Tests for DirectedGraph."""

import pytest

from pointgraph import DirectedGraph, Edge, InvalidEdgeError, PointKey, new_directed_graph


class TestVertices:
    """Tests for vertex operations."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        G = new_directed_graph()
        assert isinstance(G, DirectedGraph)
        assert G.directed is True
        assert G.vertex_size() == 0
        assert G.edge_size() == 0
        assert G.list_vertices() == []
        assert G.list_edges() == []

    def test_put_vertex(self):
        """Test adding vertices and rejecting duplicates."""
        G = new_directed_graph()
        assert G.put_vertex(PointKey.of(1, 1)) is True
        assert G.put_vertex(PointKey.of(1, 1)) is False
        assert G.put_vertex(PointKey.of(1, 1, 0)) is False
        assert G.vertex_size() == 1
        assert G.contains_vertex(PointKey.of(1, 1, 0, 0))

    def test_list_vertices_sorted(self):
        """Test that vertices are listed in PointKey order."""
        G = new_directed_graph()
        for p in [PointKey.of(2), PointKey.of(0, 5), PointKey.of(1)]:
            G.put_vertex(p)
        assert G.list_vertices() == [PointKey.of(0, 5), PointKey.of(1), PointKey.of(2)]

    def test_del_vertex_returns_true_on_success(self):
        """Test that del_vertex returns True on success and False afterwards."""
        G = new_directed_graph()
        G.put_vertex(PointKey.of(1))
        assert G.del_vertex(PointKey.of(1)) is True
        assert G.del_vertex(PointKey.of(1)) is False
        assert G.vertex_size() == 0

    def test_del_vertex_absent(self):
        """Test deleting a vertex that was never added."""
        G = new_directed_graph()
        assert G.del_vertex(PointKey.of(9)) is False

    def test_del_vertex_cascades(self, chain, points):
        """Test that incoming and outgoing edges are purged."""
        a, b, c = points
        chain.put_edge(c, b)
        assert chain.del_vertex(b) is True
        assert b not in chain.list_vertices()
        assert chain.list_edges() == []
        assert chain.edge_size() == 0
        assert chain.edges_from_vertex(a) == []
        assert chain.edges_to_vertex(c) == []

    def test_len_and_contains(self, chain, points):
        """Test the Python protocol helpers."""
        a, _, _ = points
        assert len(chain) == 3
        assert a in chain
        assert PointKey.of(5, 5) not in chain
        assert "A" not in chain


class TestEdges:
    """Tests for edge operations."""

    def test_put_edge(self, points):
        """Test adding an edge."""
        a, b, _ = points
        G = new_directed_graph()
        G.put_vertex(a)
        G.put_vertex(b)
        assert G.put_edge(a, b, 5) is True
        assert G.get_edge(a, b) == Edge.of(a, b, 5)
        assert G.contains_edge(a, b)
        assert G.edge_size() == 1

    def test_put_edge_requires_vertices(self, points):
        """Test that endpoints are never created implicitly."""
        a, b, _ = points
        G = new_directed_graph()
        G.put_vertex(a)
        assert G.put_edge(a, b) is False
        assert G.put_edge(b, a) is False
        assert G.vertex_size() == 1
        assert G.edge_size() == 0

    def test_put_edge_self_loop(self, points):
        """Test that a self-loop is refused, including across dimensions."""
        G = new_directed_graph()
        G.put_vertex(PointKey.of(3))
        assert G.put_edge(PointKey.of(3), PointKey.of(3)) is False
        assert G.put_edge(PointKey.of(3), PointKey.of(3, 0)) is False
        assert G.edge_size() == 0

    def test_put_edge_duplicate_keeps_weight(self, chain, points):
        """Test that re-putting an edge fails and leaves the weight alone."""
        a, b, _ = points
        assert chain.put_edge(a, b, 9) is False
        assert chain.get_edge(a, b).weight == 1

    def test_put_edge_invalid_weight(self, chain, points):
        """Test that invalid weights raise without touching the graph."""
        a, _, c = points
        with pytest.raises(InvalidEdgeError):
            chain.put_edge(a, c, 0)
        assert not chain.contains_edge(a, c)
        assert chain.edge_size() == 2

    def test_direction_asymmetry(self, points):
        """Test that a->b and b->a are independent edges."""
        a, b, _ = points
        G = new_directed_graph()
        G.put_vertex(a)
        G.put_vertex(b)
        G.put_edge(a, b, 5)
        assert G.get_edge(b, a) is None
        assert not G.contains_edge(b, a)
        assert G.put_edge(b, a, 7) is True
        assert G.get_edge(a, b).weight == 5
        assert G.get_edge(b, a).weight == 7
        assert G.edge_size() == 2

    def test_get_edge_missing_vertex(self, chain):
        """Test lookups on unknown vertices."""
        assert chain.get_edge(PointKey.of(9), PointKey.of(0, 0)) is None
        assert chain.get_edge(PointKey.of(0, 0), PointKey.of(9)) is None

    def test_reset_weight(self, chain, points):
        """Test updating a weight in place."""
        a, b, _ = points
        assert chain.reset_weight(a, b, 8) is True
        assert chain.get_edge(a, b).weight == 8
        assert chain.incoming(b)[a].weight == 8

    def test_reset_weight_absent(self, chain, points):
        """Test resetting an edge that does not exist."""
        a, b, c = points
        assert chain.reset_weight(b, a, 3) is False
        assert chain.reset_weight(a, c, 3) is False
        assert chain.reset_weight(a, PointKey.of(7), 3) is False
        assert chain.get_edge(b, a) is None

    def test_del_edge(self, chain, points):
        """Test removing an edge from both adjacency maps."""
        a, b, _ = points
        assert chain.del_edge(a, b) is True
        assert chain.del_edge(a, b) is False
        assert chain.get_edge(a, b) is None
        assert a not in chain.incoming(b)
        assert chain.edge_size() == 1

    def test_del_edge_wrong_direction(self, chain, points):
        """Test that deleting b->a does not remove a->b."""
        a, b, _ = points
        assert chain.del_edge(b, a) is False
        assert chain.contains_edge(a, b)


class TestIncidentEdges:
    """Tests for per-vertex edge listings."""

    def test_edges_from_and_to(self, chain, points):
        """Test outgoing and incoming listings keep the original direction."""
        a, b, c = points
        assert chain.edges_from_vertex(b) == [Edge.of(b, c)]
        assert chain.edges_to_vertex(b) == [Edge.of(a, b)]

    def test_edges_on_vertex(self, chain, points):
        """Test that on-vertex listing is outgoing followed by incoming."""
        a, b, c = points
        assert chain.edges_on_vertex(b) == [Edge.of(b, c), Edge.of(a, b)]

    def test_edges_on_vertex_not_deduplicated(self, chain, points):
        """Test that a two-way pair yields two distinct edges."""
        a, b, _ = points
        chain.put_edge(b, a, 3)
        on_a = chain.edges_on_vertex(a)
        assert on_a == [Edge.of(a, b), Edge.of(b, a, 3)]

    def test_missing_vertex_listings(self, chain):
        """Test that listings for an unknown vertex are None."""
        missing = PointKey.of(4, 4)
        assert chain.edges_on_vertex(missing) is None
        assert chain.edges_from_vertex(missing) is None
        assert chain.edges_to_vertex(missing) is None

    def test_list_edges_order(self, points):
        """Test that edges are listed by (source, target)."""
        a, b, c = points
        G = new_directed_graph()
        for p in points:
            G.put_vertex(p)
        G.put_edge(c, a)
        G.put_edge(a, c)
        G.put_edge(a, b)
        assert G.list_edges() == [Edge.of(a, b), Edge.of(a, c), Edge.of(c, a)]


class TestCopy:
    """Tests for copying graphs."""

    def test_copy_is_independent(self, chain, points):
        """Test that mutating a copy leaves the original alone."""
        a, b, c = points
        clone = chain.copy()
        assert isinstance(clone, DirectedGraph)
        assert clone.list_vertices() == chain.list_vertices()
        assert clone.list_edges() == chain.list_edges()
        clone.del_vertex(b)
        assert chain.edge_size() == 2
        assert clone.edge_size() == 0

    def test_repr(self, chain):
        """Test the summary representation."""
        assert repr(chain) == "DirectedGraph(vertices=3, edges=2)"
