"""Pytest configuration and shared fixtures for pointgraph tests.

This module provides:
- The three points A=(0,0), B=(1,0), C=(2,0) used across scenarios
- Empty and pre-built directed/undirected graphs
- Isolation of the global debug flag between tests
"""

import pytest

from pointgraph import (
    PointKey,
    new_directed_graph,
    new_undirected_graph,
    set_debug_enabled,
)
from pointgraph.diagnostics import is_debug_enabled


@pytest.fixture
def points():
    """Return the points A=(0,0), B=(1,0), C=(2,0)."""
    return PointKey.of(0, 0), PointKey.of(1, 0), PointKey.of(2, 0)


@pytest.fixture
def chain(points):
    """Directed graph A->B->C, both edges weight 1."""
    a, b, c = points
    G = new_directed_graph()
    for p in points:
        G.put_vertex(p)
    G.put_edge(a, b)
    G.put_edge(b, c)
    return G


@pytest.fixture
def grid():
    """Undirected 3x3 grid graph with unit weights, keyed by (x, y)."""
    G = new_undirected_graph()
    for x in range(3):
        for y in range(3):
            G.put_vertex(PointKey.of(x, y))
    for x in range(3):
        for y in range(3):
            if x < 2:
                G.put_edge(PointKey.of(x, y), PointKey.of(x + 1, y))
            if y < 2:
                G.put_edge(PointKey.of(x, y), PointKey.of(x, y + 1))
    return G


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture so a test toggling debug mode cannot leak it."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
