"""
Directed point graph.

Each vertex keeps two maps: edges starting at it (``_adj``, keyed by target)
and edges ending at it (``_in``, keyed by source). The incoming record holds
the same Edge as the outgoing one, direction unchanged.
"""

from typing import Dict, List, Mapping, Optional

from ..logging import get_logger
from .core import PointGraph
from .edge import Edge, check_weight
from .point import PointKey

logger = get_logger(__name__)


class DirectedGraph(PointGraph):
    """
    Directed weighted graph over PointKey vertices.

    ``edge(a, b)`` and ``edge(b, a)`` are independent: either may exist
    without the other, with its own weight.

    Example:
        >>> g = DirectedGraph()
        >>> a, b = PointKey.of(0, 0), PointKey.of(1, 0)
        >>> g.put_vertex(a), g.put_vertex(b), g.put_edge(a, b, 5)
        (True, True, True)
        >>> g.get_edge(b, a) is None
        True
    """

    directed = True

    def __init__(self):
        super().__init__()
        self._in: Dict[PointKey, Dict[PointKey, Edge]] = {}

    def _on_vertex_added(self, p: PointKey) -> None:
        self._in[p] = {}

    def del_vertex(self, p: PointKey) -> bool:
        v = self._points.pop(p, None)
        if v is None:
            return False
        outgoing = self._adj.pop(v)
        incoming = self._in.pop(v)
        for q in incoming:
            del self._adj[q][v]
        for r in outgoing:
            del self._in[r][v]
        logger.debug(
            f"del vertex {v!r} with {len(outgoing)} outgoing and {len(incoming)} incoming edges"
        )
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
        self._store(Edge(v1, v2, weight))
        logger.debug(f"put edge {v1!r}->{v2!r} weight {weight}")
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
        self._store(Edge(v1, v2, weight))
        logger.debug(f"reset edge {v1!r}->{v2!r} to weight {weight}")
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
        del self._in[v2][v1]
        logger.debug(f"del edge {v1!r}->{v2!r}")
        self._after_mutation()
        return True

    def _store(self, edge: Edge) -> None:
        self._adj[edge.source][edge.target] = edge
        self._in[edge.target][edge.source] = edge

    def edge_size(self) -> int:
        return sum(len(adjacent) for adjacent in self._adj.values())

    def edges_on_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        """
        Outgoing edges of p followed by its incoming edges.

        An edge pair a->b, b->a shows up twice, once per direction.
        """
        outgoing = self.edges_from_vertex(p)
        if outgoing is None:
            return None
        return outgoing + self.edges_to_vertex(p)

    def edges_to_vertex(self, p: PointKey) -> Optional[List[Edge]]:
        incoming = self._in.get(p)
        if incoming is None:
            return None
        return [incoming[q] for q in sorted(incoming)]

    def list_edges(self) -> List[Edge]:
        edges = []
        for v in sorted(self._adj):
            adjacent = self._adj[v]
            edges.extend(adjacent[n] for n in sorted(adjacent))
        return edges

    def incoming(self, p: PointKey) -> Mapping[PointKey, Edge]:
        return self._in[p]
