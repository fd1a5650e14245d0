"""Axial hex coordinates and their conversion to and from surface space.

Cells are pointy-topped. A cell (q, r) is centered at

    x = sqrt(3) * q + sqrt(3)/2 * r
    y = -3/2 * r

times the cell scale, then rotated by the layout angle. Positive r runs
down-right on screen, positive q runs right.
"""

import math
from dataclasses import dataclass

Point = tuple[float, float]

SQRT3 = math.sqrt(3.0)

# Shear from axial to surface space, row-major: [[a, b], [c, d]]
_SHEAR = (SQRT3, SQRT3 / 2.0, 0.0, -1.5)
# Its exact inverse
_INVERSE_SHEAR = (1.0 / SQRT3, 1.0 / 3.0, 0.0, -2.0 / 3.0)


@dataclass(frozen=True)
class AxialCoord:
    """One cell of the infinite hex lattice. Hashable, compares by value."""

    q: int
    r: int

    @property
    def s(self) -> int:
        """Implicit third cube coordinate, q + r + s == 0."""
        return -self.q - self.r

    def __iter__(self):
        yield self.q
        yield self.r


def rotate(point: Point, angle: float) -> Point:
    """Rotate a point counter-clockwise about the origin."""
    x, y = point
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def _apply(matrix: tuple[float, float, float, float], point: Point) -> Point:
    a, b, c, d = matrix
    x, y = point
    return (a * x + b * y, c * x + d * y)


def to_surface(coord: AxialCoord, scale: float, angle: float) -> Point:
    """Center of a cell in surface space."""
    sheared = _apply(_SHEAR, (float(coord.q), float(coord.r)))
    return rotate((sheared[0] * scale, sheared[1] * scale), angle)


def to_axial_float(point: Point, scale: float, angle: float) -> Point:
    """Fractional axial (q, r) of a surface point; inverse of to_surface."""
    q, r = _apply(_INVERSE_SHEAR, rotate(point, -angle))
    return (q / scale, r / scale)


def _round_half_away(value: float) -> float:
    # Python's round() is banker's rounding; ties must resolve away from zero
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_nearest_hex(q: float, r: float) -> AxialCoord:
    """Round fractional axial coordinates to the containing cell.

    Each cube component is rounded independently, then the one with the
    largest rounding error is recomputed from the other two so that
    q + r + s == 0. Ties go to s first, then r, so q is only recomputed
    when its error is strictly the largest.
    """
    s = -q - r
    rq, rr, rs = _round_half_away(q), _round_half_away(r), _round_half_away(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs

    return AxialCoord(int(rq), int(rr))


def point_to_hex(point: Point, scale: float, angle: float) -> AxialCoord:
    """Cell containing a surface point."""
    return round_to_nearest_hex(*to_axial_float(point, scale, angle))


def hex_corner(center: Point, size: float, angle: float, index: int) -> Point:
    """Corner `index` (0-5) of a pointy-topped hexagon of circumradius `size`.

    Corner 0 points straight up before rotation; the rest follow
    counter-clockwise at 60 degree intervals.
    """
    dx, dy = rotate((0.0, size), angle + index * math.pi / 3.0)
    return (center[0] + dx, center[1] + dy)
