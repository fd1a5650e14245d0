"""Tuning layouts: how lattice directions map to pitch steps and colors."""

import logging
import math
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hexkeys.exceptions import ConfigurationError, UnknownLayoutError
from hexkeys.hexgrid.axial import AxialCoord
from hexkeys.utils import PydanticPersistence

from .color import Color

logger = logging.getLogger(__name__)


class TuningLayout(BaseModel):
    """Immutable mapping from lattice cells to pitch steps and palette colors.

    A cell's step is ``q_weight * q + r_weight * r``; its color is the palette
    entry at that step modulo the palette length, so the palette repeats once
    per octave when its length equals the EDO.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="custom", description="Display name")
    rotation_angle: float = Field(default=0.0, description="Lattice rotation (radians)")
    q_weight: int = Field(description="Steps added per move along the q axis")
    r_weight: int = Field(description="Steps added per move along the r axis")
    colors: tuple[Color, ...] = Field(min_length=1, description="Cyclic color palette")

    @property
    def palette_size(self) -> int:
        return len(self.colors)

    def step_of(self, coord: AxialCoord) -> int:
        """Pitch step of a cell; negative below the origin."""
        return self.q_weight * coord.q + self.r_weight * coord.r

    def color_index_of(self, coord: AxialCoord) -> int:
        """Palette index of a cell, always in [0, palette_size)."""
        size = len(self.colors)
        return ((self.step_of(coord) % size) + size) % size

    def color_of(self, coord: AxialCoord) -> Color:
        return self.colors[self.color_index_of(coord)]


class LayoutConfig(BaseModel):
    """Layout description as read from a JSON file.

    Example:
        ```json
        {"name": "my-31", "angle": 16.1, "q_weight": 5, "r_weight": 3,
         "colors": ["#ffffff", "#cfcfcf", "#7b7b7b"]}
        ```
    """

    name: str = "custom"
    angle: float = Field(default=0.0, description="Lattice rotation in degrees")
    q_weight: int
    r_weight: int
    colors: list[str] = Field(min_length=1)

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, v: list[str]) -> list[str]:
        """Ensure every palette entry parses as a hex color."""
        for value in v:
            Color.from_hex(value)
        return v

    def to_layout(self) -> TuningLayout:
        return TuningLayout(
            name=self.name,
            rotation_angle=math.radians(self.angle),
            q_weight=self.q_weight,
            r_weight=self.r_weight,
            colors=tuple(Color.from_hex(c) for c in self.colors),
        )

    @classmethod
    def from_layout(cls, layout: TuningLayout) -> "LayoutConfig":
        return cls(
            name=layout.name,
            angle=math.degrees(layout.rotation_angle),
            q_weight=layout.q_weight,
            r_weight=layout.r_weight,
            colors=[c.to_hex() for c in layout.colors],
        )


# Palette shades, from naturals to the most remote accidentals
WHITE = Color.from_hex("#ffffff")
LIGHT = Color.from_hex("#cfcfcf")
TAN = Color.from_hex("#bbaa93")
GRAY = Color.from_hex("#7b7b7b")
ORANGE = Color.from_hex("#ff9f41")

# Rotation that lays the Bosanquet-style lattice out comfortably on screen
DEFAULT_ANGLE = math.radians(16.102113752)


def _edo_palette(edo: int, classes: dict[Color, set[int]], default: Color) -> tuple[Color, ...]:
    """Build a palette of `edo` entries, coloring each step by its class."""
    palette = [default] * edo
    for color, steps in classes.items():
        for step in steps:
            palette[step % edo] = color
    return tuple(palette)


def edo12_layout() -> TuningLayout:
    """12-EDO: whole tone 2 steps, semitone 1 step."""
    return TuningLayout(
        name="edo12",
        rotation_angle=DEFAULT_ANGLE,
        q_weight=2,
        r_weight=1,
        colors=_edo_palette(12, {WHITE: {0, 2, 4, 5, 7, 9, 11}}, GRAY),
    )


def edo31_layout() -> TuningLayout:
    """31-EDO: whole tone 5 steps, diatonic semitone 3 steps."""
    return TuningLayout(
        name="edo31",
        rotation_angle=DEFAULT_ANGLE,
        q_weight=5,
        r_weight=3,
        colors=_edo_palette(
            31,
            {
                WHITE: {0, 5, 10, 13, 18, 23, 28},
                LIGHT: {2, 7, 12, 15, 20, 25, 30},
                TAN: {29, 3, 8, 11, 16, 21, 26},
                GRAY: {4, 9, 17, 22, 27},
            },
            ORANGE,
        ),
    )


def edo53_layout() -> TuningLayout:
    """53-EDO: whole tone 9 steps, diatonic semitone 4 steps."""
    naturals = {0, 9, 18, 22, 31, 40, 49}
    return TuningLayout(
        name="edo53",
        rotation_angle=DEFAULT_ANGLE,
        q_weight=9,
        r_weight=4,
        colors=_edo_palette(
            53,
            {
                WHITE: naturals,
                LIGHT: {5, 14, 27, 36, 45},
                TAN: {4, 13, 26, 35, 44},
                # A comma above or below each natural
                ORANGE: {(n + d) % 53 for n in naturals for d in (-1, 1)},
            },
            GRAY,
        ),
    )


PRESET_LAYOUTS = {
    12: edo12_layout,
    31: edo31_layout,
    53: edo53_layout,
}


def get_preset_layout(edo: int) -> TuningLayout:
    """Look up a predefined layout by EDO.

    Raises:
        UnknownLayoutError: If no preset exists for `edo`
    """
    factory = PRESET_LAYOUTS.get(edo)
    if factory is None:
        raise UnknownLayoutError(edo, available=sorted(PRESET_LAYOUTS))
    return factory()


def load_layout(path: Optional[Path] = None, edo: Optional[int] = None) -> TuningLayout:
    """Resolve the startup layout: a description file wins over a preset EDO.

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid,
            or the EDO has no preset
    """
    if path is not None:
        try:
            config = PydanticPersistence.load_json(path, LayoutConfig)
        except FileNotFoundError as e:
            raise ConfigurationError(
                user_message=f"Layout file not found: {path}",
                recovery_hint="Check the path passed to --layout",
            ) from e
        layout = config.to_layout()
        logger.info(
            f"Loaded layout '{layout.name}' from {path} "
            f"(q={layout.q_weight}, r={layout.r_weight}, {layout.palette_size} colors)"
        )
        return layout

    layout = get_preset_layout(31 if edo is None else edo)
    logger.info(f"Using preset layout '{layout.name}'")
    return layout
