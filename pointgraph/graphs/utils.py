"""
Utility functions for point-graph paths.

Provides the backward walk that turns a parent-edge map into a path, plus
small helpers for inspecting edge paths.
"""

from typing import Dict, List, Optional, Sequence

from .edge import Edge
from .point import PointKey


def reconstruct_edge_path(
    parent_edge: Dict[PointKey, Optional[Edge]], source: PointKey, target: PointKey
) -> Optional[List[Edge]]:
    """
    Reconstruct the edge path from source to target using a parent-edge map.

    ``parent_edge[p]`` is the edge that first discovered ``p`` during a
    search; the source maps to None. The walk stops on the first point equal
    to ``source`` by value, so keys such as ``Point(3)`` and ``Point(3,0)``
    terminate it alike.

    Args:
        parent_edge: Mapping point -> discovering edge (None for the source).
        source: Start of the search.
        target: Point to walk back from.

    Returns:
        Edges in source -> target order, ``[]`` if target equals source, or
        None if target was never discovered.

    Example:
        >>> a, b, c = PointKey.of(0), PointKey.of(1), PointKey.of(2)
        >>> parent = {a: None, b: Edge.of(a, b), c: Edge.of(b, c)}
        >>> reconstruct_edge_path(parent, a, c)
        [Line{Point(0)->Point(1),1}, Line{Point(1)->Point(2),1}]
    """
    if target not in parent_edge:
        return None

    path: List[Edge] = []
    current = target
    while current != source:
        edge = parent_edge[current]
        if edge is None or len(path) >= len(parent_edge):
            # Walked off the search tree; the map was not rooted at source.
            return None
        path.append(edge)
        current = edge.source

    path.reverse()
    return path


def path_points(path: Sequence[Edge]) -> List[PointKey]:
    """
    List the points visited along an edge path, both ends included.

    Args:
        path: Consecutive edges where each target is the next source.

    Returns:
        Points in visiting order; empty for an empty path.

    Raises:
        ValueError: If consecutive edges do not join up.
    """
    if not path:
        return []
    points = [path[0].source]
    for edge in path:
        if edge.source != points[-1]:
            raise ValueError(f"Edge {edge!r} does not continue from {points[-1]!r}")
        points.append(edge.target)
    return points


def path_weight(path: Sequence[Edge]) -> int:
    """Total weight of the edges on a path (0 for an empty path)."""
    return sum(edge.weight for edge in path)
