"""CLI subcommands."""

from .config import config
from .layouts import layouts
from .midi import midi_group

__all__ = ["config", "layouts", "midi_group"]
