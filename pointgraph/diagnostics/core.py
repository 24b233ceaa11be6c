"""Invariant checks for point graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..graphs.core import PointGraph


def check_graph_invariants(graph: "PointGraph") -> List[str]:
    """
    Collect every adjacency invariant the graph currently violates.

    Checks, for each stored edge ``v -> n``: the edge is oriented away from
    ``v`` and ends at ``n``; ``n`` is a vertex of the graph; the edge is not
    a self-loop; the weight is a positive integer. Directed graphs must mirror
    every outgoing edge into the target's incoming map (and nothing else);
    undirected graphs must hold the reversed edge, with the same weight, at
    the other endpoint.

    Parameters
    ----------
    graph:
        DirectedGraph or UndirectedGraph to inspect. Only the public
        adjacency views are used.

    Returns
    -------
    list of str
        Human-readable problem descriptions; empty when the graph is valid.
    """
    problems: List[str] = []
    vertices = graph.list_vertices()
    vertex_set = set(vertices)

    for v in vertices:
        for n, edge in graph.outgoing(v).items():
            if n not in vertex_set:
                problems.append(f"{v!r} has an edge to missing vertex {n!r}")
                continue
            if n == v:
                problems.append(f"self-loop stored on {v!r}")
            if edge.source != v or edge.target != n:
                problems.append(f"edge {edge!r} stored under {v!r}->{n!r}")
            if not isinstance(edge.weight, int) or edge.weight <= 0:
                problems.append(f"edge {edge!r} has non-positive weight")

            if graph.directed:
                mirror = graph.incoming(n).get(v)
                if mirror != edge:
                    problems.append(f"incoming record of {n!r} disagrees with {edge!r}: {mirror!r}")
            else:
                mirror = graph.outgoing(n).get(v)
                if mirror is None:
                    problems.append(f"undirected edge {edge!r} has no mirror at {n!r}")
                elif mirror.weight != edge.weight:
                    problems.append(
                        f"undirected edge {v!r}-{n!r} has weights {edge.weight} and {mirror.weight}"
                    )

        if graph.directed:
            for q, edge in graph.incoming(v).items():
                if q not in vertex_set:
                    problems.append(f"{v!r} has an edge from missing vertex {q!r}")
                elif graph.outgoing(q).get(v) != edge:
                    problems.append(f"incoming record {edge!r} at {v!r} has no outgoing match")

    return problems


def assert_graph_consistent(graph: "PointGraph") -> None:
    """
    Assert that a graph satisfies all adjacency invariants.

    Parameters
    ----------
    graph:
        Graph to validate.

    Raises
    ------
    ValueError
        If any invariant is violated; the message lists every problem found.
    """
    problems = check_graph_invariants(graph)
    if problems:
        raise ValueError(
            f"{type(graph).__name__} is inconsistent: " + "; ".join(problems)
        )
