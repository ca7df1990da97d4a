"""Point value type for star positions.

A Point3D is an immutable (x, y, z) triple with no identity beyond its
values. Position lists are plain Python lists of points, owned by whoever
requested them.

Example:
    >>> from src.starfield.core.point import Point3D, positions_to_numpy
    >>> p = Point3D(1.0, 2.0, 3.0)
    >>> x, y, z = p
    >>> positions_to_numpy([p]).shape
    (1, 3)
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class Point3D:
    """An immutable point in 3D space.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate (the shell's polar axis).
        z: Depth coordinate.
    """

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the point as a plain (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def distance_from_y_axis(self) -> float:
        """Distance of the point from the vertical (y) axis."""
        return math.hypot(self.x, self.z)

    def norm(self) -> float:
        """Euclidean distance of the point from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


# Ordered sequence of points produced by one generator call
PositionList = list[Point3D]


def positions_to_numpy(
    points: Sequence[Point3D],
    dtype: npt.DTypeLike = np.float32,
) -> npt.NDArray[np.floating[npt.NBitBase]]:
    """Pack a position list into a contiguous array.

    float32 matches the device fields. Pass np.float64 to keep the host
    coordinates exact.

    Args:
        points: Points to pack, in order.
        dtype: Element type of the array.

    Returns:
        Array of shape (N, 3). An empty input yields shape (0, 3).
    """
    if not points:
        return np.zeros((0, 3), dtype=dtype)
    return np.array([p.to_tuple() for p in points], dtype=dtype)
