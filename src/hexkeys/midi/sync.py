"""Keeps a MIDI output device in step with the keyboard model.

The device is never queried. Its state is mirrored in `sounding_notes`,
which is always empty or a prefix of the model's active steps, so the only
operations ever needed are appending notes (note-on) and a full reset
(note-off for everything sounding).
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional

import mido

from hexkeys.exceptions import DeviceSyncError

from .output import MidiOutput

if TYPE_CHECKING:
    from hexkeys.core.model import Model

logger = logging.getLogger(__name__)

MIDI_KEY_MIN = 0
MIDI_KEY_MAX = 127


class SyncAction(Enum):
    """What a reconcile pass did to the device."""

    NONE = "none"
    APPEND = "append"
    RESET = "reset"
    RESET_AND_APPEND = "reset_and_append"


class DeviceSync:
    """
    Mirrors the model's active steps onto a MIDI output.

    Out-of-range steps are tracked in `sounding_notes` like any other so the
    prefix relation holds, but no message is ever sent for them.
    """

    def __init__(
        self,
        output: MidiOutput,
        base_key: int = 60,
        velocity: int = 64,
        channel: int = 0,
    ):
        """
        Args:
            output: Output port; exclusively owned from here on
            base_key: MIDI key number of step 0
            velocity: Velocity for note-on and note-off
            channel: MIDI channel (0-15)
        """
        self._output = output
        self._base_key = base_key
        self._velocity = velocity
        self._channel = channel
        self._sounding: list[int] = []
        self._generation: Optional[int] = None

    @property
    def sounding_notes(self) -> tuple[int, ...]:
        return tuple(self._sounding)

    @property
    def output(self) -> MidiOutput:
        return self._output

    def key_of(self, step: int) -> Optional[int]:
        """Device key number for a step, or None outside 0-127."""
        key = self._base_key + step
        if MIDI_KEY_MIN <= key <= MIDI_KEY_MAX:
            return key
        return None

    def _send(self, kind: str, key: int) -> None:
        # Best effort: bookkeeping advances whether or not this reaches the device
        self._output.send(
            mido.Message(kind, note=key, velocity=self._velocity, channel=self._channel)
        )

    def _note_on(self, step: int) -> None:
        key = self.key_of(step)
        if key is None:
            logger.debug(f"Step {step} is outside the MIDI key range, not sent")
        else:
            self._send("note_on", key)
        self._sounding.append(step)

    def all_notes_off(self) -> None:
        """Send note-off for every sounding note and forget them.

        Individual note-offs are sent rather than an "all notes off"
        controller message, which some synths ignore.
        """
        for step in self._sounding:
            key = self.key_of(step)
            if key is not None:
                self._send("note_off", key)
        if self._sounding:
            logger.debug(f"Released {len(self._sounding)} notes")
        self._sounding.clear()

    def reconcile(self, model: "Model") -> SyncAction:
        """
        Bring the device in line with `model.active_steps`.

        Returns:
            The action taken

        Raises:
            DeviceSyncError: If steps disappeared without a full reset
        """
        active = model.active_steps
        action = SyncAction.NONE

        if self._generation is not None and model.generation != self._generation:
            # Everything was released since the last pass, maybe re-pressed since
            self.all_notes_off()
            action = SyncAction.RESET
        self._generation = model.generation

        m, b = len(active), len(self._sounding)

        if m > b:
            for step in active[b:]:
                self._note_on(step)
            return SyncAction.RESET_AND_APPEND if action is SyncAction.RESET else SyncAction.APPEND

        if m == 0:
            self.all_notes_off()
            return SyncAction.RESET

        if m < b:
            raise DeviceSyncError(active=m, sounding=b)

        return action

    def panic(self) -> None:
        """Send note-off for all 128 keys on the channel and forget all notes."""
        for key in range(MIDI_KEY_MIN, MIDI_KEY_MAX + 1):
            self._send("note_off", key)
        self._sounding.clear()
        logger.info("Sent note-off for all keys")

    def close(self) -> None:
        """Silence anything still sounding and close the output."""
        self.all_notes_off()
        self._output.close()
