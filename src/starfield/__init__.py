"""Python implementation of the starfield shell layout.

This package places a fixed number of decorative star points on a spherical
shell around the viewer, ready to be handed to a 3D scene as point or
particle positions. It provides:
- A pure, deterministic per-index placement formula
- Injectable randomness for the per-star jitter
- A Taichi kernel that evaluates the same layout into a GPU field
- Export of position lists to JSON, NumPy and CSV files

Subpackages:
    core: Point type, error types and randomness sources
    shell: Shell layout configuration, host generator and device kernel
    export: Reading and writing position lists
"""

__version__ = "0.1.0"
