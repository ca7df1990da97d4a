"""Device-side star shell evaluation.

This module evaluates the star layout inside a Taichi kernel and keeps the
result in a GPU-resident vector field, so a renderer can read the positions
directly from other kernels via get_position().

Jitter is still drawn on the host from an injected RandomSource (see
draw_jitter_values). The kernel only runs the deterministic geometry, so
the device layout matches generate_positions for the same source, up to
float32 precision.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.gpu)
    >>> from src.starfield.core.random_source import NumpyRandomSource
    >>> from src.starfield.shell.kernels import upload_positions, get_positions_numpy
    >>> upload_positions(64, source=NumpyRandomSource(seed=3))
    64
    >>> get_positions_numpy().shape
    (64, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm
from loguru import logger

from src.starfield.core.random_source import RandomSource, default_random_source
from src.starfield.shell.layout import DEFAULT_LAYOUT, ShellLayout
from src.starfield.shell.positions import draw_jitter_values, validate_size

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Maximum number of stars held on the device
MAX_POSITIONS = 4096

# =============================================================================
# Taichi Fields for Star State (GPU-accessible)
# =============================================================================

star_positions = ti.Vector.field(3, dtype=ti.f32, shape=MAX_POSITIONS)
star_jitter = ti.field(dtype=ti.f32, shape=MAX_POSITIONS)
num_positions = ti.field(dtype=ti.i32, shape=())


def clear_positions() -> None:
    """Clear all stars from the device.

    Resets the star count to zero. The field data is overwritten by the
    next upload.
    """
    num_positions[None] = 0


def get_position_count() -> int:
    """Get the number of stars currently on the device."""
    return int(num_positions[None])


# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def _evaluate_shell(
    size: ti.i32,
    radius: ti.f32,
    odd_polar_deg: ti.f32,
    even_polar_deg: ti.f32,
    azimuth_jitter_scale: ti.f32,
    even_azimuth_offset_deg: ti.f32,
    azimuth_sweep_deg: ti.f32,
    azimuth_phase_rad: ti.f32,
):
    """Fill star_positions[0:size] from star_jitter[0:size]."""
    deg_to_rad = tm.pi / 180.0
    step = azimuth_sweep_deg / ti.cast(size, ti.f32)
    for i in range(size):
        rand = star_jitter[i]

        base_polar = even_polar_deg
        offset = even_azimuth_offset_deg
        if i % 2 == 1:
            base_polar = odd_polar_deg
            offset = 0.0

        angle = (base_polar + rand) * deg_to_rad
        pos = (
            step * ti.cast(i // 2, ti.f32) + rand * azimuth_jitter_scale + offset
        ) * deg_to_rad + azimuth_phase_rad

        ring_radius = radius * ti.sin(angle)
        star_positions[i] = vec3(
            ti.cos(pos) * ring_radius,
            radius * ti.cos(angle),
            ti.sin(pos) * ring_radius,
        )


@ti.func
def get_position(i: ti.i32) -> vec3:
    """Get the position of star ``i`` from within a Taichi kernel.

    Args:
        i: Star index in [0, get_position_count()).

    Returns:
        The star position as a vec3.
    """
    return star_positions[i]


# =============================================================================
# Upload (Python-side)
# =============================================================================


def upload_positions(
    size: int,
    source: RandomSource | None = None,
    layout: ShellLayout = DEFAULT_LAYOUT,
) -> int:
    """Evaluate the star shell on the device.

    Args:
        size: Number of stars, a non-negative integer.
        source: Random source for the jitter. When omitted a fresh
            NumpyRandomSource is created for this call.
        layout: Shell parameters.

    Returns:
        The number of stars now on the device.

    Raises:
        InvalidArgumentError: If size is negative or not an integer.
        RuntimeError: If size exceeds MAX_POSITIONS.
    """
    size = validate_size(size)
    if size > MAX_POSITIONS:
        raise RuntimeError(f"Maximum number of star positions ({MAX_POSITIONS}) exceeded")

    clear_positions()
    if size == 0:
        return 0

    if source is None:
        source = default_random_source()
    jitter = draw_jitter_values(size, source, layout)

    padded = np.zeros(MAX_POSITIONS, dtype=np.float32)
    padded[:size] = jitter
    star_jitter.from_numpy(padded)

    _evaluate_shell(
        size,
        layout.radius,
        layout.odd_polar_deg,
        layout.even_polar_deg,
        layout.azimuth_jitter_scale,
        layout.even_azimuth_offset_deg,
        layout.azimuth_sweep_deg,
        layout.azimuth_phase_rad,
    )
    num_positions[None] = size

    logger.debug("Uploaded {} star positions to the device", size)
    return size


def get_positions_numpy() -> npt.NDArray[np.float32]:
    """Copy the device star positions to a NumPy array.

    Returns:
        Array of shape (count, 3) with dtype float32.
    """
    count = get_position_count()
    return star_positions.to_numpy()[:count].astype(np.float32)


def get_star_jitter_numpy() -> npt.NDArray[np.float32]:
    """Copy the jitter terms used by the last upload to a NumPy array."""
    count = get_position_count()
    return star_jitter.to_numpy()[:count].astype(np.float32)
