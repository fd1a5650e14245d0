"""Main loop wiring input, model, device and display together."""

import logging
import time
from typing import Iterable, Optional

import pygame

from hexkeys.hexgrid import HexBoard
from hexkeys.midi import DeviceSync
from hexkeys.models import AppConfig, TuningLayout
from hexkeys.render.pygame_renderer import PygameRenderer

from .input import InputTranslator
from .messages import Message
from .model import Model, update

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tricesimoprimal Keyboard"


class Application:
    """
    Runs the keyboard one tick at a time.

    A tick drains the buffered messages through `update` in arrival order,
    reconciles the output device once against the resulting model, then
    redraws. Nothing here blocks except the idle sleep between ticks.
    """

    def __init__(
        self,
        model: Model,
        sync: DeviceSync,
        renderer: Optional[PygameRenderer] = None,
        translator: Optional[InputTranslator] = None,
        idle_delay: float = 0.01,
    ):
        self.model = model
        self.sync = sync
        self.renderer = renderer or PygameRenderer()
        self.translator = translator or InputTranslator()
        self.idle_delay = idle_delay
        self.running = False
        self._mailbox: list[Message] = []
        self._needs_update = True

    @classmethod
    def from_config(cls, config: AppConfig, layout: TuningLayout, sync: DeviceSync) -> "Application":
        board = HexBoard(
            viewport_size=(float(config.window_width), float(config.window_height)),
            layout=layout,
            hex_radius=config.hex_radius,
            hex_gap=config.hex_gap,
        )
        return cls(Model(board=board), sync, idle_delay=config.idle_delay)

    @property
    def pending(self) -> tuple[Message, ...]:
        return tuple(self._mailbox)

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Buffer the messages for a batch of raw events."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
                continue
            message = self.translator.translate(event)
            if message is not None:
                self._mailbox.append(message)
            self._needs_update = True

    def tick(self) -> Model:
        """Fold pending messages into the model and sync the device once."""
        for message in self._mailbox:
            self.model = update(self.model, message)
        self._mailbox.clear()

        self.sync.reconcile(self.model)
        self.model.board.draw(self.renderer)
        self._needs_update = False
        return self.model

    def run(self) -> None:
        """Open the window and loop until it is closed."""
        pygame.init()
        try:
            width, height = self.model.board.viewport_size
            surface = pygame.display.set_mode((int(width), int(height)), pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            logger.info(f"Window opened at {int(width)}x{int(height)}")

            self.running = True
            while self.running:
                self.handle_events(pygame.event.get())

                if self._needs_update:
                    self.tick()
                    self.renderer.present(surface)
                    pygame.display.flip()
                else:
                    time.sleep(self.idle_delay)
        finally:
            self.sync.close()
            pygame.quit()
            logger.info("Window closed")
