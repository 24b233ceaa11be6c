"""Weighted edges between two distinct points."""

import operator
from dataclasses import dataclass

from .point import PointKey


class InvalidEdgeError(ValueError):
    """Raised when an edge would be a self-loop or carry a non-positive weight."""


def check_weight(weight) -> int:
    """
    Validate an edge weight.

    Returns:
        The weight as a plain int.

    Raises:
        InvalidEdgeError: If the weight is not a positive integer.
    """
    try:
        value = operator.index(weight)
    except TypeError:
        raise InvalidEdgeError(
            f"Edge weight must be an integer, got {type(weight).__name__}"
        ) from None
    if value <= 0:
        raise InvalidEdgeError(f"Edge weight must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed (source, target, weight) triple.

    An undirected graph stores one logical edge as two mirrored Edge
    instances, one oriented away from each endpoint.

    Attributes:
        source: Start point.
        target: End point, never equal to ``source``.
        weight: Positive integer weight (default 1).
    """

    source: PointKey
    target: PointKey
    weight: int = 1

    def __post_init__(self):
        if self.source == self.target:
            raise InvalidEdgeError(f"Self-loop edge on {self.source!r} is not allowed")
        object.__setattr__(self, "weight", check_weight(self.weight))

    @classmethod
    def of(cls, source: PointKey, target: PointKey, weight: int = 1) -> "Edge":
        """
        Build an edge from ``source`` to ``target``.

        Raises:
            InvalidEdgeError: If the endpoints are equal under PointKey
                ordering, or the weight is not a positive integer.
        """
        return cls(source, target, weight)

    def reverse(self) -> "Edge":
        """Return the edge (target, source) with the same weight."""
        return Edge(self.target, self.source, self.weight)

    def canonical(self) -> "Edge":
        """Return this edge oriented from its smaller endpoint to the larger one."""
        return self if self.source < self.target else self.reverse()

    def __repr__(self) -> str:
        return f"Line{{{self.source!r}->{self.target!r},{self.weight}}}"
