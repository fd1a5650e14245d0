"""Semantic input messages consumed by the reducer."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

import pygame

# Holding this key keeps notes sounding after the pointer is released
SUSTAIN_KEY = pygame.K_SPACE


class KeyState(Enum):
    """Whether a key went down or up."""

    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class ViewportResized:
    size: tuple[float, float]


@dataclass(frozen=True)
class PointerPressed:
    pos: tuple[float, float]


@dataclass(frozen=True)
class PointerReleased:
    pass


@dataclass(frozen=True)
class KeyEvent:
    state: KeyState
    key: int


Message = Union[ViewportResized, PointerPressed, PointerReleased, KeyEvent]
