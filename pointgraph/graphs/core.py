"""
Operation set shared by directed and undirected point graphs.

Vertices are PointKeys; edges carry positive integer weights. Mutations
report failure with a False return and leave the graph untouched; lookups
report a missing vertex or edge with None. Listings come back in PointKey
order, which also fixes the order in which traversals expand neighbors.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from ..diagnostics import assert_graph_consistent, is_debug_enabled
from ..logging import get_logger
from .edge import Edge
from .point import PointKey
from .traversal import bfs_path, dfs_path, reachable_in_steps

logger = get_logger(__name__)


class PointGraph(ABC):
    """
    Abstract weighted graph over PointKey vertices.

    Subclasses own the edge bookkeeping. The base class keeps, for every
    vertex, the map of edges that start there (``_adj``) and implements
    everything that only needs that forward view.

    Attributes:
        directed: True for DirectedGraph, False for UndirectedGraph.
    """

    directed: bool = False

    def __init__(self):
        """Initialize an empty graph."""
        # Stored key for every vertex; lets equal keys of another length
        # resolve to the instance that was put.
        self._points: Dict[PointKey, PointKey] = {}
        self._adj: Dict[PointKey, Dict[PointKey, Edge]] = {}

    # -- vertices ---------------------------------------------------------

    def put_vertex(self, p: PointKey) -> bool:
        """
        Add a vertex.

        Args:
            p: Key of the new vertex.

        Returns:
            True if added, False if an equal key is already present.
        """
        if p in self._points:
            return False
        self._points[p] = p
        self._adj[p] = {}
        self._on_vertex_added(p)
        logger.debug(f"put vertex {p!r}")
        self._after_mutation()
        return True

    @abstractmethod
    def del_vertex(self, p: PointKey) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Returns:
            True if removed, False if the vertex is absent.
        """

    def vertex_size(self) -> int:
        return len(self._points)

    def contains_vertex(self, p: PointKey) -> bool:
        return p in self._points

    def list_vertices(self) -> List[PointKey]:
        """Return all vertices in PointKey order."""
        return sorted(self._points)

    # -- edges ------------------------------------------------------------

    @abstractmethod
    def put_edge(self, p1: PointKey, p2: PointKey, weight: int = 1) -> bool:
        """
        Add an edge between two existing, distinct vertices.

        Both endpoints must already be vertices; they are never created
        implicitly. If the edge exists its weight is left unchanged.

        Args:
            p1: Edge start.
            p2: Edge target.
            weight: Positive integer weight (default 1).

        Returns:
            True if added; False if either vertex is missing, p1 equals p2,
            or the edge already exists.

        Raises:
            InvalidEdgeError: If weight is not a positive integer.
        """

    @abstractmethod
    def reset_weight(self, p1: PointKey, p2: PointKey, weight: int) -> bool:
        """
        Replace the weight of an existing edge.

        Returns:
            True if updated, False if the edge is absent.

        Raises:
            InvalidEdgeError: If weight is not a positive integer.
        """

    @abstractmethod
    def del_edge(self, p1: PointKey, p2: PointKey) -> bool:
        """
        Remove an edge.

        Returns:
            True if removed, False if the edge is absent.
        """

    @abstractmethod
    def edge_size(self) -> int:
        """Number of edges; an undirected edge counts once."""

    def contains_edge(self, p1: PointKey, p2: PointKey) -> bool:
        return self.get_edge(p1, p2) is not None

    def get_edge(self, p1: PointKey, p2: PointKey) -> Optional[Edge]:
        """
        Return the edge from p1 to p2.

        Returns:
            The stored edge oriented p1 -> p2, or None if absent.
        """
        adjacent = self._adj.get(p1)
        return None if adjacent is None else adjacent.get(p2)

    @abstractmethod
    def edges_on_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """All edges touching p, or None if p is not a vertex."""

    def edges_from_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """
        Edges starting at p, ordered by target.

        Returns:
            List of edges with source p, or None if p is not a vertex.
        """
        adjacent = self._adj.get(p)
        if adjacent is None:
            return None
        return [adjacent[n] for n in sorted(adjacent)]

    @abstractmethod
    def edges_to_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """Edges ending at p, or None if p is not a vertex."""

    @abstractmethod
    def list_edges(self) -> List[Edge]:
        """Return every edge once, ordered by (source, target)."""

    # -- adjacency views --------------------------------------------------

    def outgoing(self, p: PointKey) -> Mapping[PointKey, Edge]:
        """
        Forward adjacency of p: ``{neighbor: edge}`` with edges starting at p.

        Raises:
            KeyError: If p is not a vertex.
        """
        return self._adj[p]

    @abstractmethod
    def incoming(self, p: PointKey) -> Mapping[PointKey, Edge]:
        """
        Backward adjacency of p: ``{neighbor: edge}`` for edges ending at p.

        Raises:
            KeyError: If p is not a vertex.
        """

    # -- traversal --------------------------------------------------------

    def bfs(self, p1: PointKey, p2: PointKey) -> Optional[List[Edge]]:
        """
        Breadth-first search for a fewest-hops path.

        Returns:
            Edges from p1 (excluded) to p2 (included), ``[]`` when p1 equals
            p2, or None if p2 is unreachable or either point is not a vertex.
        """
        if p1 not in self._points or p2 not in self._points:
            return None
        return bfs_path(self.outgoing, self._points[p1], self._points[p2])

    def dfs(self, p1: PointKey, p2: PointKey) -> Optional[List[Edge]]:
        """
        Depth-biased single-discovery search for a path.

        Returns:
            Same shape as :meth:`bfs`; the path need not be the shortest.
        """
        if p1 not in self._points or p2 not in self._points:
            return None
        return dfs_path(self.outgoing, self._points[p1], self._points[p2])

    def list_reachable_in_steps(self, p: PointKey, steps: int) -> Optional[List[PointKey]]:
        """
        Points reachable from p following at most ``steps`` edges.

        Returns:
            Points in PointKey order, p included; None if p is not a vertex.

        Raises:
            ValueError: If steps is negative.
        """
        if p not in self._points:
            return None
        return reachable_in_steps(self.outgoing, self._points[p], steps)

    def list_inverse_reachable_in_steps(self, p: PointKey, steps: int) -> Optional[List[PointKey]]:
        """
        Points that reach p following at most ``steps`` edges.

        Returns:
            Points in PointKey order, p included; None if p is not a vertex.

        Raises:
            ValueError: If steps is negative.
        """
        if p not in self._points:
            return None
        return reachable_in_steps(self.incoming, self._points[p], steps)

    # -- misc -------------------------------------------------------------

    def copy(self) -> "PointGraph":
        """Return an independent graph of the same variant with equal content."""
        clone = type(self)()
        for p in self.list_vertices():
            clone.put_vertex(p)
        for edge in self.list_edges():
            clone.put_edge(edge.source, edge.target, edge.weight)
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, p: object) -> bool:
        return isinstance(p, PointKey) and p in self._points

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_size()}, edges={self.edge_size()})"

    # -- hooks ------------------------------------------------------------

    def _on_vertex_added(self, p: PointKey) -> None:
        pass

    def _endpoints(self, p1: PointKey, p2: PointKey):
        """Resolve two keys to stored vertices, or None if unusable for an edge."""
        v1 = self._points.get(p1)
        v2 = self._points.get(p2)
        if v1 is None or v2 is None or v1 == v2:
            return None
        return v1, v2

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            assert_graph_consistent(self)
