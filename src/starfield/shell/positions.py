"""Star position generator.

This module places ``size`` stars on a spherical shell of radius R around the
origin. For index i the generator:

1. Draws a jitter term ``rand`` in [0, jitter_range). Index 0 is never
   jittered, so the first star is fully deterministic.
2. Picks the polar angle from the odd or even ring plus the jitter.
3. Steps the azimuth by ``sweep / size`` per star pair, plus four times the
   jitter (in degrees), plus a fixed offset for even indices, plus a
   constant phase in radians.
4. Converts (azimuth, polar) to Cartesian coordinates with +y up.

The geometry (compute_point) is pure. Randomness is drawn separately
(draw_jitter_values) from an injected RandomSource, so a layout can be
reproduced exactly by fixing the source.

Example:
    >>> from src.starfield.core.random_source import NumpyRandomSource
    >>> from src.starfield.shell.positions import generate_positions
    >>> stars = generate_positions(12, source=NumpyRandomSource(seed=1))
    >>> len(stars)
    12
"""

from __future__ import annotations

import math
import numbers

import numpy as np
import numpy.typing as npt
from loguru import logger

from src.starfield.core.errors import InvalidArgumentError
from src.starfield.core.point import Point3D, PositionList
from src.starfield.core.random_source import RandomSource, default_random_source
from src.starfield.shell.layout import DEFAULT_LAYOUT, ShellLayout

# =============================================================================
# Argument Validation
# =============================================================================


def _require_integer(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return int(value)


def validate_size(size: object) -> int:
    """Check that ``size`` is a usable star count.

    Args:
        size: Requested number of stars.

    Returns:
        The size as a plain int.

    Raises:
        InvalidArgumentError: If size is not an integer (bools and floats are
            rejected, NumPy integers are accepted) or is negative.
    """
    size = _require_integer("Size", size)
    if size < 0:
        raise InvalidArgumentError(f"Size must be a non-negative integer, got {size}")
    return size


# =============================================================================
# Deterministic Geometry
# =============================================================================


def compute_point(
    index: int,
    size: int,
    rand: float,
    layout: ShellLayout = DEFAULT_LAYOUT,
) -> Point3D:
    """Compute the position of one star.

    This is the deterministic core of the layout: the same arguments always
    produce the same point.

    Args:
        index: Star index in [0, size).
        size: Total number of stars in the shell (must be positive).
        rand: Jitter term for this star, normally in [0, layout.jitter_range).
        layout: Shell parameters.

    Returns:
        The star position. It lies at height ``R cos(angle)`` and at distance
        ``R |sin(angle)|`` from the y axis.

    Raises:
        InvalidArgumentError: If index or size is not an integer, size is not
            positive, or index is out of range.
    """
    index = _require_integer("Index", index)
    size = _require_integer("Size", size)
    if size <= 0:
        raise InvalidArgumentError(f"Size must be positive to place a star, got {size}")
    if not 0 <= index < size:
        raise InvalidArgumentError(f"Index {index} out of range for size {size}")

    angle = layout.polar_angle(index, rand)
    pos = layout.azimuth(index, size, rand)

    ring_radius = layout.radius * math.sin(angle)
    return Point3D(
        math.cos(pos) * ring_radius,
        layout.radius * math.cos(angle),
        math.sin(pos) * ring_radius,
    )


# =============================================================================
# Random Supply
# =============================================================================


def draw_jitter_values(
    size: int,
    source: RandomSource,
    layout: ShellLayout = DEFAULT_LAYOUT,
) -> npt.NDArray[np.float64]:
    """Draw the per-star jitter terms.

    Index 0 always gets 0. Every other index gets ``source.random()`` scaled
    to [0, layout.jitter_range). Exactly ``size - 1`` values are drawn.

    Args:
        size: Number of stars (already validated).
        source: Supplier of uniform values in [0, 1).
        layout: Shell parameters.

    Returns:
        Array of shape (size,).

    Raises:
        InvalidArgumentError: If the source returns a value outside [0, 1).
    """
    jitter = np.zeros(size, dtype=np.float64)
    for i in range(1, size):
        u = float(source.random())
        if not 0.0 <= u < 1.0:
            raise InvalidArgumentError(
                f"Random source returned {u} for index {i}, expected a value in [0, 1)"
            )
        jitter[i] = u * layout.jitter_range
    return jitter


# =============================================================================
# Generator
# =============================================================================


def generate_positions(
    size: int,
    source: RandomSource | None = None,
    layout: ShellLayout = DEFAULT_LAYOUT,
) -> PositionList:
    """Generate the star positions for a shell of ``size`` stars.

    Args:
        size: Number of stars, a non-negative integer.
        source: Random source for the jitter. When omitted a fresh
            NumpyRandomSource is created for this call.
        layout: Shell parameters (defaults to the radius-40 shell).

    Returns:
        A new list of exactly ``size`` points. ``size == 0`` returns an empty
        list without touching the random source.

    Raises:
        InvalidArgumentError: If size is negative or not an integer.
    """
    size = validate_size(size)
    if size == 0:
        logger.debug("Star shell requested with size 0, returning no positions")
        return []

    if source is None:
        source = default_random_source()

    jitter = draw_jitter_values(size, source, layout)
    positions = [compute_point(i, size, float(jitter[i]), layout) for i in range(size)]

    logger.debug(
        "Generated {} star positions on shell of radius {}", size, layout.radius
    )
    return positions


def get_position_list(size: int, source: RandomSource | None = None) -> PositionList:
    """Generate star positions on the default radius-40 shell.

    Shorthand for ``generate_positions(size, source)``.
    """
    return generate_positions(size, source=source)
