"""
Undirected point graph.

One logical edge is stored as two mirrored Edge instances, one in the
adjacency map of each endpoint and each oriented away from it. Both always
carry the same weight.
"""

from typing import List, Mapping, Optional

from ..logging import get_logger
from .core import PointGraph
from .edge import Edge, check_weight
from .point import PointKey

logger = get_logger(__name__)


class UndirectedGraph(PointGraph):
    """
    Undirected weighted graph over PointKey vertices.

    ``get_edge(a, b)`` and ``get_edge(b, a)`` find the same logical edge,
    oriented from the first argument to the second.

    Example:
        >>> g = UndirectedGraph()
        >>> a, b = PointKey.of(0, 0), PointKey.of(1, 0)
        >>> g.put_vertex(a), g.put_vertex(b), g.put_edge(a, b, 2)
        (True, True, True)
        >>> g.get_edge(b, a)
        Line{Point(1,0)->Point(0,0),2}
        >>> g.edge_size()
        1
    """

    directed = False

    def del_vertex(self, p: PointKey) -> bool:
        v = self._points.pop(p, None)
        if v is None:
            return False
        adjacent = self._adj.pop(v)
        for q in adjacent:
            del self._adj[q][v]
        logger.debug(f"del vertex {v!r} with {len(adjacent)} edges")
        self._after_mutation()
        return True

    def put_edge(self, p1: PointKey, p2: PointKey, weight: int = 1) -> bool:
        weight = check_weight(weight)
        endpoints = self._endpoints(p1, p2)
        if endpoints is None:
            return False
        v1, v2 = endpoints
        if v2 in self._adj[v1]:
            return False
        self._store(v1, v2, weight)
        logger.debug(f"put edge {v1!r}-{v2!r} weight {weight}")
        self._after_mutation()
        return True

    def reset_weight(self, p1: PointKey, p2: PointKey, weight: int) -> bool:
        weight = check_weight(weight)
        endpoints = self._endpoints(p1, p2)
        if endpoints is None:
            return False
        v1, v2 = endpoints
        if v2 not in self._adj[v1]:
            return False
        self._store(v1, v2, weight)
        logger.debug(f"reset edge {v1!r}-{v2!r} to weight {weight}")
        self._after_mutation()
        return True

    def del_edge(self, p1: PointKey, p2: PointKey) -> bool:
        endpoints = self._endpoints(p1, p2)
        if endpoints is None:
            return False
        v1, v2 = endpoints
        if v2 not in self._adj[v1]:
            return False
        del self._adj[v1][v2]
        del self._adj[v2][v1]
        logger.debug(f"del edge {v1!r}-{v2!r}")
        self._after_mutation()
        return True

    def _store(self, v1: PointKey, v2: PointKey, weight: int) -> None:
        self._adj[v1][v2] = Edge(v1, v2, weight)
        self._adj[v2][v1] = Edge(v2, v1, weight)

    def edge_size(self) -> int:
        return sum(len(adjacent) for adjacent in self._adj.values()) // 2

    def edges_on_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """Edges touching p, each in canonical orientation (smaller endpoint first)."""
        edges = self.edges_from_vertex(p)
        if edges is None:
            return None
        return [edge.canonical() for edge in edges]

    def edges_to_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """The edges of :meth:`edges_from_vertex`, each reversed to end at p."""
        edges = self.edges_from_vertex(p)
        if edges is None:
            return None
        return [edge.reverse() for edge in edges]

    def list_edges(self) -> List[Edge]:
        """Every logical edge once, in canonical orientation."""
        edges = []
        for v in sorted(self._adj):
            adjacent = self._adj[v]
            edges.extend(adjacent[n] for n in sorted(adjacent) if v < n)
        return edges

    def incoming(self, p: PointKey) -> Mapping[PointKey, Edge]:
        return self._adj[p]

    def list_inverse_reachable_in_steps(self, p: PointKey, steps: int) -> Optional[List[PointKey]]:
        # Every edge runs both ways, so backward reach equals forward reach.
        return self.list_reachable_in_steps(p, steps)
