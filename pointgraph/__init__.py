"""pointgraph - weighted graphs over integer-coordinate points."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_graph_consistent,
    check_graph_invariants,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    DirectedGraph,
    Edge,
    InvalidEdgeError,
    PointGraph,
    PointKey,
    UndirectedGraph,
    bfs_path,
    dfs_path,
    new_directed_graph,
    new_undirected_graph,
    path_points,
    path_weight,
    reachable_in_steps,
    reconstruct_edge_path,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
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
    # Diagnostics
    "check_graph_invariants",
    "assert_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
