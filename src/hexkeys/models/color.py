"""Color model for hexagon rendering."""

import string

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so palettes are immutable and colors are hashable.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a CSS hex color string ('#RRGGBB' or 'RRGGBB').

        Raises:
            ValueError: If the string is not a 6-digit hex color

        Example:
            >>> Color.from_hex("#ff9f41")
            Color(r=255, g=159, b=65)
        """
        digits = value.strip().removeprefix("#")
        # int(..., 16) alone would also accept signs and underscores
        if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Expected a '#rrggbb' color, got {value!r}")
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def scaled(self, factor: float) -> "Color":
        """Multiply every channel by factor, truncating and clamping to 0-255.

        Example:
            >>> Color(r=255, g=100, b=0).scaled(0.5)
            Color(r=127, g=50, b=0)
        """
        def channel(v: int) -> int:
            return max(0, min(255, int(v * factor)))

        return Color(r=channel(self.r), g=channel(self.g), b=channel(self.b))
