"""
Graph traversal over point graphs: BFS/DFS path search and bounded reachability.

Every algorithm takes a neighbor function ``p -> {neighbor: edge}`` instead of
a graph, so directed and undirected graphs share one implementation and the
same graph can be walked forward (outgoing edges) or backward (incoming
edges). Neighbors are expanded in PointKey order for reproducible results.

Each call allocates its own visited/parent-edge bookkeeping; nothing is
shared between calls and the graph is never mutated.
"""

from collections import deque
from typing import Callable, Dict, List, Mapping, Optional

from ..logging import get_logger
from .edge import Edge
from .point import PointKey
from .utils import reconstruct_edge_path

logger = get_logger(__name__)

NeighborFn = Callable[[PointKey], Mapping[PointKey, Edge]]


def _search_path(
    neighbors: NeighborFn, source: PointKey, target: PointKey, depth_first: bool
) -> Optional[List[Edge]]:
    if source == target:
        return []

    parent_edge: Dict[PointKey, Optional[Edge]] = {source: None}
    frontier = deque([source])

    while frontier:
        current = frontier.pop() if depth_first else frontier.popleft()
        if current == target:
            return reconstruct_edge_path(parent_edge, source, target)

        adjacent = neighbors(current)
        for point in sorted(adjacent):
            if point in parent_edge:
                continue
            parent_edge[point] = adjacent[point]
            frontier.append(point)

    logger.debug(f"{target!r} unreachable from {source!r} after visiting {len(parent_edge)} points")
    return None


def bfs_path(neighbors: NeighborFn, source: PointKey, target: PointKey) -> Optional[List[Edge]]:
    """
    Breadth-first search for a fewest-hops path from source to target.

    Each point is recorded once, with the edge that first discovered it; the
    search stops the first time ``target`` leaves the queue.

    Args:
        neighbors: Adjacency view returning ``{neighbor: edge}`` for a point,
            each edge oriented away from that point.
        source: Start point.
        target: Point to reach.

    Returns:
        Edges from source (excluded) to target (included) in order, ``[]``
        if source equals target, or None if target is unreachable.

    Complexity: O(V log V + E) including the per-vertex neighbor sort.

    Example:
        >>> a, b, c = PointKey.of(0, 0), PointKey.of(1, 0), PointKey.of(2, 0)
        >>> adj = {a: {b: Edge.of(a, b)}, b: {c: Edge.of(b, c)}, c: {}}
        >>> bfs_path(adj.__getitem__, a, c)
        [Line{Point(0,0)->Point(1,0),1}, Line{Point(1,0)->Point(2,0),1}]
    """
    return _search_path(neighbors, source, target, depth_first=False)


def dfs_path(neighbors: NeighborFn, source: PointKey, target: PointKey) -> Optional[List[Edge]]:
    """
    Depth-biased search for a path from source to target.

    Uses the same parent-edge bookkeeping as :func:`bfs_path` with a stack
    for the frontier. A point is discovered and recorded only once, when it
    is first pushed; there is no revisiting and no backtrack-and-retry, so
    the path found is not the classical recursive-DFS path.

    Args:
        neighbors: Adjacency view returning ``{neighbor: edge}`` for a point.
        source: Start point.
        target: Point to reach.

    Returns:
        Edges from source (excluded) to target (included), ``[]`` if source
        equals target, or None if target is unreachable.
    """
    return _search_path(neighbors, source, target, depth_first=True)


def reachable_in_steps(neighbors: NeighborFn, source: PointKey, steps: int) -> List[PointKey]:
    """
    List every point reachable from source within ``steps`` hops.

    Layer-by-layer BFS; a point whose distance equals ``steps`` is recorded
    but not expanded.

    Args:
        neighbors: Adjacency view returning ``{neighbor: edge}`` for a point.
        source: Start point (distance 0, always included).
        steps: Maximum number of hops, >= 0.

    Returns:
        Discovered points in PointKey order. ``steps=0`` gives ``[source]``.

    Raises:
        ValueError: If steps is negative.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    distance: Dict[PointKey, int] = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        step = distance[current]
        if step == steps:
            continue
        for point in sorted(neighbors(current)):
            if point in distance:
                continue
            distance[point] = step + 1
            queue.append(point)

    return sorted(distance)
