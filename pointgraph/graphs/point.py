"""
Integer-coordinate points used as vertex identities.

A PointKey holds any number of signed 32-bit coordinates. Keys of different
lengths compare as if the shorter one were padded with trailing zeros, so
``PointKey.of(3)``, ``PointKey.of(3, 0)`` and ``PointKey.of(3, 0, 0)`` are the
same vertex: they compare equal and share one hash.
"""

import operator
from functools import total_ordering
from itertools import zip_longest
from typing import Iterable, Tuple, Union

import numpy as np

_INT32 = np.iinfo(np.int32)

CoordinateLike = Union[int, np.integer]


def _check_coordinate(value: CoordinateLike) -> int:
    try:
        coord = operator.index(value)
    except TypeError:
        raise TypeError(
            f"Point coordinates must be integers, got {type(value).__name__}"
        ) from None
    if coord < _INT32.min or coord > _INT32.max:
        raise ValueError(f"Point coordinate {coord} is outside the signed 32-bit range")
    return coord


def _trim(coords: Tuple[int, ...]) -> Tuple[int, ...]:
    end = len(coords)
    while end > 0 and coords[end - 1] == 0:
        end -= 1
    return coords[:end]


@total_ordering
class PointKey:
    """
    Immutable integer-coordinate tuple identifying a graph vertex.

    Ordering compares the common coordinate prefix pairwise; on a tie the
    shorter key is zero-extended to the longer length. Equality and hashing
    follow the same rule, which makes trailing zeros insignificant.

    Attributes:
        coords: Coordinates exactly as given at construction.

    Example:
        >>> PointKey.of(1, 2) < PointKey.of(1, 3)
        True
        >>> PointKey.of(3) == PointKey.of(3, 0, 0)
        True
    """

    __slots__ = ("_coords", "_trimmed")

    def __init__(self, coords: Iterable[CoordinateLike] = ()):
        """
        Build a point from an iterable of coordinates.

        Args:
            coords: Integer coordinates, each within the signed 32-bit range.

        Raises:
            TypeError: If a coordinate is not an integer.
            ValueError: If a coordinate does not fit in 32 bits.
        """
        checked = tuple(_check_coordinate(c) for c in coords)
        object.__setattr__(self, "_coords", checked)
        object.__setattr__(self, "_trimmed", _trim(checked))

    @classmethod
    def of(cls, *coords) -> "PointKey":
        """
        Construct a point from coordinates.

        Accepts either the coordinates as positional arguments or a single
        iterable (list, tuple, numpy array) of them.

        Example:
            >>> PointKey.of(1, 2) == PointKey.of([1, 2]) == PointKey.of(np.array([1, 2]))
            True
        """
        if len(coords) == 1 and not isinstance(coords[0], (int, np.integer)):
            return cls(coords[0])
        return cls(coords)

    @property
    def coords(self) -> Tuple[int, ...]:
        return self._coords

    @property
    def dimension(self) -> int:
        """Number of coordinates as given, trailing zeros included."""
        return len(self._coords)

    def to_array(self) -> np.ndarray:
        """
        Return the coordinates as a new int32 numpy array.

        Returns:
            Array of shape (dimension,). Modifying it does not affect the point.
        """
        return np.array(self._coords, dtype=np.int32)

    def compare_to(self, other: "PointKey") -> int:
        """
        Three-way comparison under zero-extension.

        Returns:
            -1, 0 or 1 as this point is smaller than, equal to, or larger
            than ``other``.
        """
        for a, b in zip_longest(self._coords, other._coords, fillvalue=0):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointKey):
            return NotImplemented
        return self._trimmed == other._trimmed

    def __lt__(self, other: "PointKey") -> bool:
        if not isinstance(other, PointKey):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self._trimmed)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._coords,))

    def __iter__(self):
        return iter(self._coords)

    def __repr__(self) -> str:
        return "Point(" + ",".join(str(c) for c in self._coords) + ")"
