"""Hexkeys: microtonal hexagonal keyboard for MIDI synths."""

__version__ = "0.1.0"
