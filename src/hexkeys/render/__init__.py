"""Rendering collaborators: fan geometry and the pygame backend."""

from .fan import FanBuffer, Render, Vertex

__all__ = ["FanBuffer", "Render", "Vertex"]
