"""Hexagonal lattice math and keyboard press state."""

from .axial import (
    AxialCoord,
    hex_corner,
    point_to_hex,
    round_to_nearest_hex,
    to_axial_float,
    to_surface,
)
from .board import CoordRange, HexBoard, visible_range

__all__ = [
    "AxialCoord",
    "CoordRange",
    "HexBoard",
    "hex_corner",
    "point_to_hex",
    "round_to_nearest_hex",
    "to_axial_float",
    "to_surface",
    "visible_range",
]
