"""MIDI output and device state mirroring."""

from .output import MidiOutput
from .sync import DeviceSync, SyncAction

__all__ = ["DeviceSync", "MidiOutput", "SyncAction"]
