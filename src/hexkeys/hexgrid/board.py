"""Press state over the hex lattice and its projection to screen geometry."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hexkeys.render.fan import Render, Vertex

from .axial import AxialCoord, Point, hex_corner, point_to_hex, to_surface

if TYPE_CHECKING:
    from hexkeys.models import Color, TuningLayout

logger = logging.getLogger(__name__)

PRESSED_DIM = 0.5


@dataclass(frozen=True)
class CoordRange:
    """Inclusive bounds of lattice cells along each axis."""

    q_min: int
    q_max: int
    r_min: int
    r_max: int

    def padded(self, cells: int) -> "CoordRange":
        return CoordRange(
            self.q_min - cells, self.q_max + cells, self.r_min - cells, self.r_max + cells
        )

    def cells(self) -> Iterator[AxialCoord]:
        for q in range(self.q_min, self.q_max + 1):
            for r in range(self.r_min, self.r_max + 1):
                yield AxialCoord(q, r)

    def __contains__(self, coord: AxialCoord) -> bool:
        return self.q_min <= coord.q <= self.q_max and self.r_min <= coord.r <= self.r_max

    @property
    def is_empty(self) -> bool:
        return self.q_min > self.q_max or self.r_min > self.r_max


# Nothing is visible in a window with no area
EMPTY_RANGE = CoordRange(0, -1, 0, -1)


def visible_range(
    viewport_size: tuple[float, float], cell_pitch: float, angle: float
) -> CoordRange:
    """Cells whose centers the viewport corners round to, as min/max per axis.

    Works in normalized aspect-scaled space: y spans [-1, 1] and x spans
    [-w/h, w/h], so `cell_pitch` is in pixels and divided by the height here.
    """
    width, height = viewport_size
    if width <= 0 or height <= 0:
        return EMPTY_RANGE
    aspect = width / height
    scale = cell_pitch / height
    corners = [
        point_to_hex((x, y), scale, angle)
        for x in (-aspect, aspect)
        for y in (-1.0, 1.0)
    ]
    qs = [c.q for c in corners]
    rs = [c.r for c in corners]
    return CoordRange(min(qs), max(qs), min(rs), max(rs))


@dataclass
class HexBoard:
    """Lattice press state for one keyboard window.

    `pressed` is append-only between releases and keeps duplicates: pressing
    the same cell twice records it twice. Whether a cell is dimmed only
    depends on it being present at least once.
    """

    viewport_size: tuple[float, float]
    layout: "TuningLayout"
    hex_radius: float = 80.0
    hex_gap: float = 2.0
    pressed: list[AxialCoord] = field(default_factory=list)

    @property
    def cell_pitch(self) -> float:
        """Distance unit between neighbouring cell centers, in pixels."""
        return self.hex_radius + self.hex_gap

    def copy(self) -> "HexBoard":
        return HexBoard(
            viewport_size=self.viewport_size,
            layout=self.layout,
            hex_radius=self.hex_radius,
            hex_gap=self.hex_gap,
            pressed=list(self.pressed),
        )

    def coord_at(self, point: Point) -> AxialCoord:
        """Cell under a window pixel position (origin top-left, y down)."""
        width, height = self.viewport_size
        x, y = point
        # Recenter on the viewport and flip y; units are doubled pixels
        centered = (2.0 * x - width, -(2.0 * y - height))
        return point_to_hex(centered, self.cell_pitch, self.layout.rotation_angle)

    def press(self, point: Point) -> int:
        """Record a press at a window position and return its pitch step.

        The step is not range-checked; whether it is playable is the output
        device's concern.
        """
        coord = self.coord_at(point)
        self.pressed.append(coord)
        step = self.layout.step_of(coord)
        logger.debug(f"Pressed {coord} at {point} -> step {step}")
        return step

    def release_all(self) -> None:
        self.pressed.clear()

    def is_pressed(self, coord: AxialCoord) -> bool:
        return coord in self.pressed

    def color_of(self, coord: AxialCoord) -> "Color":
        """Palette color of a cell, dimmed while the cell is held."""
        color = self.layout.color_of(coord)
        if self.is_pressed(coord):
            return color.scaled(PRESSED_DIM)
        return color

    def visible_range(self) -> CoordRange:
        return visible_range(self.viewport_size, self.cell_pitch, self.layout.rotation_angle)

    def draw(self, renderer: Render) -> None:
        """Emit one six-vertex fan per cell in view, in normalized device coords."""
        width, height = self.viewport_size
        if width <= 0 or height <= 0:
            logger.debug(f"Viewport {self.viewport_size} has no area, nothing drawn")
            return
        aspect = width / height
        size = self.hex_radius / height
        pitch = self.cell_pitch / height
        angle = self.layout.rotation_angle
        held = set(self.pressed)

        for coord in self.visible_range().padded(1).cells():
            center = to_surface(coord, pitch, angle)
            color = self.layout.color_of(coord)
            if coord in held:
                color = color.scaled(PRESSED_DIM)

            vertices = []
            for i in range(6):
                x, y = hex_corner(center, size, angle, i)
                vertices.append(Vertex(pos=(x / aspect, y), color=color))
            renderer.render_fan(vertices)
