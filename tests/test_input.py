"""Unit tests for InputTranslator."""

import pygame
import pytest

from hexkeys.core import (
    SUSTAIN_KEY,
    InputTranslator,
    KeyEvent,
    KeyState,
    PointerPressed,
    PointerReleased,
    ViewportResized,
)


def event(kind, **attrs) -> pygame.event.Event:
    return pygame.event.Event(kind, attrs)


class TestInputTranslator:
    """Test raw event to message translation."""

    @pytest.fixture
    def translator(self):
        return InputTranslator()

    @pytest.mark.unit
    def test_resize(self, translator):
        msg = translator.translate(event(pygame.VIDEORESIZE, size=(800, 500), w=800, h=500))
        assert msg == ViewportResized((800.0, 500.0))

    @pytest.mark.unit
    def test_motion_is_remembered_not_emitted(self, translator):
        assert translator.translate(event(pygame.MOUSEMOTION, pos=(10, 20), rel=(1, 1), buttons=(0, 0, 0))) is None
        assert translator.pointer == (10.0, 20.0)

    @pytest.mark.unit
    def test_press_uses_latest_position(self, translator):
        translator.translate(event(pygame.MOUSEMOTION, pos=(10, 20), rel=(0, 0), buttons=(0, 0, 0)))
        translator.translate(event(pygame.MOUSEMOTION, pos=(30, 40), rel=(0, 0), buttons=(0, 0, 0)))
        msg = translator.translate(event(pygame.MOUSEBUTTONDOWN, pos=(30, 40), button=1))
        assert msg == PointerPressed((30.0, 40.0))

    @pytest.mark.unit
    def test_press_before_any_motion(self, translator):
        msg = translator.translate(event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
        assert msg == PointerPressed((0.0, 0.0))

    @pytest.mark.unit
    def test_release(self, translator):
        assert translator.translate(event(pygame.MOUSEBUTTONUP, pos=(0, 0), button=1)) == PointerReleased()

    @pytest.mark.unit
    @pytest.mark.parametrize("button", [2, 3, 4, 5])
    def test_other_buttons_dropped(self, translator, button):
        assert translator.translate(event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=button)) is None
        assert translator.translate(event(pygame.MOUSEBUTTONUP, pos=(0, 0), button=button)) is None

    @pytest.mark.unit
    def test_keys(self, translator):
        assert translator.translate(event(pygame.KEYDOWN, key=SUSTAIN_KEY)) == KeyEvent(
            KeyState.PRESSED, SUSTAIN_KEY
        )
        assert translator.translate(event(pygame.KEYUP, key=pygame.K_a)) == KeyEvent(
            KeyState.RELEASED, pygame.K_a
        )

    @pytest.mark.unit
    def test_unrelated_events_dropped(self, translator):
        assert translator.translate(event(pygame.USEREVENT)) is None

    @pytest.mark.unit
    def test_translate_all_keeps_order(self, translator):
        messages = translator.translate_all([
            event(pygame.MOUSEMOTION, pos=(1, 2), rel=(0, 0), buttons=(0, 0, 0)),
            event(pygame.MOUSEBUTTONDOWN, pos=(1, 2), button=1),
            event(pygame.USEREVENT),
            event(pygame.MOUSEBUTTONUP, pos=(1, 2), button=1),
        ])
        assert messages == [PointerPressed((1.0, 2.0)), PointerReleased()]
