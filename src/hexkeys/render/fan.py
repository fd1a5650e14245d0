"""Triangle-fan geometry handed from the board to a rendering backend."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from hexkeys.models import Color


@dataclass(frozen=True)
class Vertex:
    """A 2D position in normalized device coordinates and its fill color."""

    pos: tuple[float, float]
    color: "Color"


class Render(Protocol):
    """Anything that can fill a convex polygon given as a triangle fan."""

    def render_fan(self, vertices: Sequence[Vertex]) -> None: ...


@dataclass
class FanBuffer:
    """Batches fans into one vertex list and a triangle index list.

    A fan v0, v1, ..., vn becomes triangles (v0, vi, vi+1).
    """

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def render_fan(self, vertices: Sequence[Vertex]) -> None:
        if len(vertices) < 3:
            raise ValueError(f"A fan needs at least 3 vertices, got {len(vertices)}")

        i0 = len(self.vertices)
        self.vertices.extend(vertices)
        for i in range(1, len(vertices) - 1):
            self.indices.extend((i0, i0 + i, i0 + i + 1))

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self):
        """Yield each triangle as a tuple of three vertices."""
        for n in range(0, len(self.indices), 3):
            a, b, c = self.indices[n:n + 3]
            yield self.vertices[a], self.vertices[b], self.vertices[c]

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()
