"""Diagnostics and debugging utilities for pointgraph."""

from .core import assert_graph_consistent, check_graph_invariants
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_graph_invariants",
    "assert_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
