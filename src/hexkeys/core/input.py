"""Translation of raw pygame events into keyboard messages."""

import logging
from typing import Optional

import pygame

from .messages import (
    KeyEvent,
    KeyState,
    Message,
    PointerPressed,
    PointerReleased,
    ViewportResized,
)

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1


class InputTranslator:
    """
    Turns pygame events into the small closed set of reducer messages.

    The only state kept is the last pointer position: motion events update
    it and produce no message, so a later button press is reported at the
    most recent position.
    """

    def __init__(self, pointer: tuple[float, float] = (0.0, 0.0)):
        self._pointer = pointer

    @property
    def pointer(self) -> tuple[float, float]:
        return self._pointer

    def translate(self, event: pygame.event.Event) -> Optional[Message]:
        """Return the message for an event, or None if it carries none."""
        if event.type == pygame.VIDEORESIZE:
            width, height = event.size
            return ViewportResized((float(width), float(height)))

        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self._pointer = (float(x), float(y))
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            return PointerPressed(self._pointer)

        if event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
            return PointerReleased()

        if event.type == pygame.KEYDOWN:
            return KeyEvent(KeyState.PRESSED, event.key)

        if event.type == pygame.KEYUP:
            return KeyEvent(KeyState.RELEASED, event.key)

        return None

    def translate_all(self, events) -> list[Message]:
        """Translate a batch of events, keeping arrival order."""
        messages = []
        for event in events:
            message = self.translate(event)
            if message is not None:
                messages.append(message)
        return messages
