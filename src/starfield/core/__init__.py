"""Core data types for star placement.

Components:
    point: Immutable Point3D value type and NumPy conversion
    errors: Argument validation errors
    random_source: Injectable sources of uniform random values

The shell generator never reaches for an ambient random function. Every
random draw goes through a RandomSource passed in by the caller, so the
deterministic part of the layout can be tested with fixed values.
"""

from .errors import InvalidArgumentError
from .point import Point3D, PositionList, positions_to_numpy
from .random_source import (
    FixedRandomSource,
    NumpyRandomSource,
    RandomSource,
    SequenceRandomSource,
    default_random_source,
)

__all__ = [
    "Point3D",
    "PositionList",
    "positions_to_numpy",
    "InvalidArgumentError",
    "RandomSource",
    "NumpyRandomSource",
    "FixedRandomSource",
    "SequenceRandomSource",
    "default_random_source",
]
