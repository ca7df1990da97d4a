"""Export module for star position lists.

Components:
    positions: Save and load position lists as JSON, NumPy or CSV files
"""

from .positions import SUPPORTED_FORMATS, load_positions, save_positions

__all__ = [
    "SUPPORTED_FORMATS",
    "save_positions",
    "load_positions",
]
