"""Keyboard model, input translation and the main loop."""

from .input import InputTranslator
from .messages import (
    SUSTAIN_KEY,
    KeyEvent,
    KeyState,
    Message,
    PointerPressed,
    PointerReleased,
    ViewportResized,
)
from .model import Model, update

__all__ = [
    "InputTranslator",
    "KeyEvent",
    "KeyState",
    "Message",
    "Model",
    "PointerPressed",
    "PointerReleased",
    "SUSTAIN_KEY",
    "ViewportResized",
    "update",
]
