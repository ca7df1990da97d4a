"""Star shell layout.

Components:
    layout: ShellLayout configuration and the default radius-40 constants
    positions: Host-side generator (compute_point, generate_positions)
    kernels: Taichi kernel evaluating the same layout into a GPU field

Stars are placed on two interleaved rings of a sphere centred on the
viewer. Even indices use the upper ring, odd indices the lower ring, and
each star pair advances the azimuth by a fixed step.
"""

from .layout import DEFAULT_LAYOUT, ShellLayout
from .positions import (
    compute_point,
    draw_jitter_values,
    generate_positions,
    get_position_list,
    validate_size,
)

# Note: kernels is NOT imported here so that the host generator can be used
# without declaring Taichi fields. Import it directly when needed:
#   from src.starfield.shell.kernels import upload_positions

__all__ = [
    "ShellLayout",
    "DEFAULT_LAYOUT",
    "compute_point",
    "draw_jitter_values",
    "generate_positions",
    "get_position_list",
    "validate_size",
]
