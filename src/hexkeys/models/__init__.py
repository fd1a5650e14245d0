"""Data models for the hexagonal keyboard."""

from .color import Color
from .config import AppConfig
from .layout import (
    PRESET_LAYOUTS,
    LayoutConfig,
    TuningLayout,
    edo12_layout,
    edo31_layout,
    edo53_layout,
    get_preset_layout,
    load_layout,
)

__all__ = [
    "AppConfig",
    "Color",
    "LayoutConfig",
    # Layouts
    "PRESET_LAYOUTS",
    "TuningLayout",
    "edo12_layout",
    "edo31_layout",
    "edo53_layout",
    "get_preset_layout",
    "load_layout",
]
