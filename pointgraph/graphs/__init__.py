"""
Point-graph package for pointgraph.

Weighted graphs whose vertices are integer-coordinate points:
- PointKey vertex identities and Edge (source, target, weight) triples
- DirectedGraph and UndirectedGraph sharing the PointGraph operation set
- Hop-count BFS/DFS path search and bounded-hop reachability
- Path helpers (reconstruct_edge_path, path_points, path_weight)

Listings and traversals expand points in PointKey order, so results are
reproducible.
"""

from .core import PointGraph
from .directed import DirectedGraph
from .edge import Edge, InvalidEdgeError
from .point import PointKey
from .traversal import bfs_path, dfs_path, reachable_in_steps
from .undirected import UndirectedGraph
from .utils import path_points, path_weight, reconstruct_edge_path


def new_directed_graph() -> DirectedGraph:
    """Return an empty directed graph."""
    return DirectedGraph()


def new_undirected_graph() -> UndirectedGraph:
    """Return an empty undirected graph."""
    return UndirectedGraph()


__all__ = [
    "PointKey",
    "Edge",
    "InvalidEdgeError",
    "PointGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "new_directed_graph",
    "new_undirected_graph",
    "bfs_path",
    "dfs_path",
    "reachable_in_steps",
    "reconstruct_edge_path",
    "path_points",
    "path_weight",
]

# Example usage:
# from pointgraph.graphs import PointKey, new_directed_graph
#
# G = new_directed_graph()
# a, b, c = PointKey.of(0, 0), PointKey.of(1, 0), PointKey.of(2, 0)
# for p in (a, b, c):
#     G.put_vertex(p)
# G.put_edge(a, b)
# G.put_edge(b, c)
# G.bfs(a, c)  # [Line{Point(0,0)->Point(1,0),1}, Line{Point(1,0)->Point(2,0),1}]
