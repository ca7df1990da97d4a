"""Shell layout configuration.

The star shell is described by a handful of constants: the shell radius,
the base polar angle of odd and even stars, the jitter range, and the
azimuth sweep and phase. ShellLayout groups them so the generator and the
device kernel read from a single place.

Stars alternate between two rings: even indices sit higher up the shell
(polar angle near 39 degrees), odd indices sit lower (near 64 degrees).
Each pair of stars shares an azimuth step, and the sweep covers two full
turns around the y axis.

Example:
    >>> from src.starfield.shell.layout import DEFAULT_LAYOUT, ShellLayout
    >>> DEFAULT_LAYOUT.radius
    40.0
    >>> wide = ShellLayout(radius=80.0)
"""

import math
from dataclasses import dataclass

from src.starfield.core.errors import InvalidArgumentError

# =============================================================================
# Shell Constants
# =============================================================================

SHELL_RADIUS = 40.0

# Base polar angles (degrees from +y) before jitter
ODD_POLAR_DEG = 64.0
EVEN_POLAR_DEG = 39.0

# Jitter is uniform in [0, JITTER_RANGE) and also drives the azimuth offset
JITTER_RANGE = 10.0
AZIMUTH_JITTER_SCALE = 4.0

EVEN_AZIMUTH_OFFSET_DEG = 10.0

# Two full turns shared across all star pairs
AZIMUTH_SWEEP_DEG = 2.0 * 360.0

# Phase is added after the degree-to-radian conversion
AZIMUTH_PHASE_RAD = 29.75


@dataclass(frozen=True)
class ShellLayout:
    """Parameters of the star shell.

    Attributes:
        radius: Shell radius in scene units.
        odd_polar_deg: Base polar angle for odd indices, in degrees.
        even_polar_deg: Base polar angle for even indices, in degrees.
        jitter_range: Upper bound (exclusive) of the per-star random term.
        azimuth_jitter_scale: Multiplier applied to the jitter when it is
            added to the azimuth, in degrees per jitter unit.
        even_azimuth_offset_deg: Extra azimuth for even indices, in degrees.
        azimuth_sweep_deg: Total azimuth covered by all star pairs, in degrees.
        azimuth_phase_rad: Constant azimuth phase, in radians.
    """

    radius: float = SHELL_RADIUS
    odd_polar_deg: float = ODD_POLAR_DEG
    even_polar_deg: float = EVEN_POLAR_DEG
    jitter_range: float = JITTER_RANGE
    azimuth_jitter_scale: float = AZIMUTH_JITTER_SCALE
    even_azimuth_offset_deg: float = EVEN_AZIMUTH_OFFSET_DEG
    azimuth_sweep_deg: float = AZIMUTH_SWEEP_DEG
    azimuth_phase_rad: float = AZIMUTH_PHASE_RAD

    def __post_init__(self) -> None:
        for name in (
            "radius",
            "odd_polar_deg",
            "even_polar_deg",
            "jitter_range",
            "azimuth_jitter_scale",
            "even_azimuth_offset_deg",
            "azimuth_sweep_deg",
            "azimuth_phase_rad",
        ):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidArgumentError(f"ShellLayout.{name} = {value} is not finite.")
        if self.radius <= 0.0:
            raise InvalidArgumentError(f"Shell radius = {self.radius} must be positive.")
        if self.jitter_range < 0.0:
            raise InvalidArgumentError(f"Jitter range = {self.jitter_range} is negative.")

    def polar_angle(self, index: int, rand: float) -> float:
        """Polar angle (radians from +y) of the star at ``index``."""
        base = self.odd_polar_deg if index % 2 else self.even_polar_deg
        return math.radians(base + rand)

    def azimuth(self, index: int, size: int, rand: float) -> float:
        """Azimuth (radians around +y) of the star at ``index`` in a shell of ``size``."""
        step = self.azimuth_sweep_deg / size
        offset = 0.0 if index % 2 else self.even_azimuth_offset_deg
        degrees = step * (index // 2) + rand * self.azimuth_jitter_scale + offset
        return math.radians(degrees) + self.azimuth_phase_rad


DEFAULT_LAYOUT = ShellLayout()
