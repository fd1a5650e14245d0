"""pygame backend for drawing the keyboard."""

import logging

import pygame

from .fan import FanBuffer

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)


class PygameRenderer(FanBuffer):
    """Collects fans during a frame and rasterizes them onto a pygame surface."""

    def to_pixels(self, pos: tuple[float, float], size: tuple[int, int]) -> tuple[float, float]:
        """Map normalized device coordinates (y up) to surface pixels (y down)."""
        width, height = size
        x, y = pos
        return ((x + 1.0) * 0.5 * width, (1.0 - y) * 0.5 * height)

    def present(self, surface: pygame.Surface) -> None:
        """Fill the surface with every batched triangle, then empty the batch."""
        size = surface.get_size()
        surface.fill(BACKGROUND)
        for a, b, c in self.triangles():
            points = [self.to_pixels(v.pos, size) for v in (a, b, c)]
            pygame.draw.polygon(surface, a.color.to_rgb_tuple(), points)
        self.clear()
