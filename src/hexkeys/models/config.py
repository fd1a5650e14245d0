"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from hexkeys.utils import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".hexkeys"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # MIDI settings
    midi_port: str | None = Field(
        default=None,
        description="MIDI output port name (None = first available output)",
    )
    base_key: int = Field(
        default=60, ge=0, le=127, description="MIDI key number played by step 0"
    )
    velocity: int = Field(default=64, ge=1, le=127, description="Note-on/off velocity")
    channel: int = Field(default=0, ge=0, le=15, description="MIDI channel (0-15)")

    # Board geometry (pixels)
    hex_radius: float = Field(default=80.0, gt=0, description="Hexagon circumradius")
    hex_gap: float = Field(default=2.0, ge=0, description="Gap added to the cell pitch")
    window_width: int = Field(default=960, gt=0, description="Initial window width")
    window_height: int = Field(default=600, gt=0, description="Initial window height")

    # Main loop
    idle_delay: float = Field(
        default=0.01, ge=0, description="Sleep between ticks when no input arrived (seconds)"
    )

    # Layout used when neither --edo nor --layout is given
    default_edo: int = Field(default=31, description="Preset EDO layout to start with")

    @classmethod
    def default_path(cls) -> Path:
        return DEFAULT_CONFIG_DIR / "config.json"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.hexkeys/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = cls.default_path()
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = self.default_path()
        PydanticPersistence.save_json(self, path)
