"""Position list export utilities.

This module writes star position lists to files a front end or renderer can
load, and reads them back.

Supported formats (chosen by file suffix):
    - .json: list of [x, y, z] lists (the shape a JavaScript scene expects)
    - .npy: float64 array of shape (N, 3) via numpy.save
    - .csv: "x,y,z" header followed by one row per star

Example:
    >>> from src.starfield.shell.positions import generate_positions
    >>> from src.starfield.export.positions import save_positions
    >>> save_positions(generate_positions(30), "stars.json")
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from loguru import logger

from src.starfield.core.point import Point3D, PositionList, positions_to_numpy

SUPPORTED_FORMATS = (".json", ".npy", ".csv")

CSV_HEADER = "x,y,z"

# 17 significant digits read back to the same float64
CSV_FORMAT = "%.17g"


def _format_for(filepath: str | Path) -> str:
    suffix = Path(filepath).suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported position file format '{suffix}'. "
            f"Expected one of: {', '.join(SUPPORTED_FORMATS)}"
        )
    return suffix


def save_positions(points: Sequence[Point3D], filepath: str | Path) -> Path:
    """Save a position list to a file.

    Args:
        points: Star positions to write.
        filepath: Output path. Its suffix selects the format.

    Returns:
        The path that was written.

    Raises:
        ValueError: If the suffix is not a supported format.
    """
    path = Path(filepath)
    fmt = _format_for(path)

    if fmt == ".json":
        with path.open("w", encoding="utf-8") as f:
            json.dump([list(p.to_tuple()) for p in points], f)
    elif fmt == ".npy":
        np.save(path, positions_to_numpy(points, dtype=np.float64))
    else:
        np.savetxt(
            path,
            positions_to_numpy(points, dtype=np.float64),
            fmt=CSV_FORMAT,
            delimiter=",",
            header=CSV_HEADER,
            comments="",
        )

    logger.info("Saved {} star positions to {}", len(points), path)
    return path


def load_positions(filepath: str | Path) -> PositionList:
    """Load a position list written by save_positions.

    Args:
        filepath: Input path. Its suffix selects the format.

    Returns:
        The star positions, in file order.

    Raises:
        ValueError: If the suffix is not a supported format or the data is
            not a list of 3-component rows.
    """
    path = Path(filepath)
    fmt = _format_for(path)

    if fmt == ".json":
        with path.open(encoding="utf-8") as f:
            data = np.asarray(json.load(f), dtype=np.float64)
    elif fmt == ".npy":
        data = np.load(path)
    else:
        data = np.loadtxt(path, delimiter=",", skiprows=1, ndmin=2)

    if data.size == 0:
        return []
    if data.ndim != 2 or data.shape[1] != 3:
        raise ValueError(f"Expected position data of shape (N, 3), got {data.shape}")

    return [Point3D(float(x), float(y), float(z)) for x, y, z in data]
