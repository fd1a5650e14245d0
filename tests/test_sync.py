"""Unit tests for DeviceSync and MidiOutput."""

from unittest.mock import Mock, patch

import mido
import pytest

from hexkeys.core import (
    SUSTAIN_KEY,
    KeyEvent,
    KeyState,
    Model,
    PointerPressed,
    PointerReleased,
    update,
)
from hexkeys.exceptions import ConfigValidationError, DeviceSyncError
from hexkeys.hexgrid import AxialCoord
from hexkeys.midi import DeviceSync, MidiOutput, SyncAction

from .conftest import pixel_of, sent

CENTER = (480.0, 300.0)


class TestReconcile:
    """Test the append / reset diff against the model."""

    @pytest.mark.unit
    def test_new_presses_sent_in_order(self, model, board, sync, mock_output):
        model = update(model, PointerPressed(CENTER))
        model = update(model, PointerPressed(pixel_of(board, AxialCoord(0, 1))))

        assert sync.reconcile(model) is SyncAction.APPEND
        assert sent(mock_output) == [("note_on", 60), ("note_on", 61)]
        assert sync.sounding_notes == (0, 1)

    @pytest.mark.unit
    def test_message_fields(self, model, mock_output):
        sync = DeviceSync(mock_output, base_key=48, velocity=100, channel=3)
        sync.reconcile(update(model, PointerPressed(CENTER)))

        msg = mock_output.send.call_args.args[0]
        assert msg.bytes() == [0x93, 48, 100]

    @pytest.mark.unit
    def test_only_the_tail_is_sent(self, model, sync, mock_output):
        model = update(model, PointerPressed(CENTER))
        sync.reconcile(model)
        mock_output.send.reset_mock()

        sync.reconcile(update(model, PointerPressed(CENTER)))
        assert sent(mock_output) == [("note_on", 60)]

    @pytest.mark.unit
    def test_unchanged_model_sends_nothing(self, model, sync, mock_output):
        model = update(model, PointerPressed(CENTER))
        sync.reconcile(model)
        mock_output.send.reset_mock()

        assert sync.reconcile(model) is SyncAction.NONE
        mock_output.send.assert_not_called()

    @pytest.mark.unit
    def test_empty_model_resets(self, model, sync, mock_output):
        assert sync.reconcile(model) is SyncAction.RESET
        assert sync.reconcile(model) is SyncAction.RESET
        mock_output.send.assert_not_called()

    @pytest.mark.unit
    def test_sustained_notes_released_together(self, model, board, sync, mock_output):
        """Press A, B, sustain, release (ignored), press C, unsustain: one bulk note-off."""
        steps = [
            PointerPressed(CENTER),
            PointerPressed(pixel_of(board, AxialCoord(1, 0))),
            KeyEvent(KeyState.PRESSED, SUSTAIN_KEY),
            PointerReleased(),
            PointerPressed(pixel_of(board, AxialCoord(0, 1))),
        ]
        for message in steps:
            model = update(model, message)
            sync.reconcile(model)

        assert model.active_steps == (0, 2, 1)
        assert sent(mock_output) == [("note_on", 60), ("note_on", 62), ("note_on", 61)]
        mock_output.send.reset_mock()

        model = update(model, KeyEvent(KeyState.RELEASED, SUSTAIN_KEY))
        assert model.active_steps == ()
        assert sync.reconcile(model) is SyncAction.RESET
        assert sent(mock_output) == [("note_off", 60), ("note_off", 62), ("note_off", 61)]
        assert sync.sounding_notes == ()

    @pytest.mark.unit
    def test_duplicate_presses_not_deduplicated(self, model, sync, mock_output):
        model = update(update(model, PointerPressed(CENTER)), PointerPressed(CENTER))
        assert model.board.pressed == [AxialCoord(0, 0), AxialCoord(0, 0)]

        sync.reconcile(model)
        assert sent(mock_output) == [("note_on", 60), ("note_on", 60)]

    @pytest.mark.unit
    def test_release_and_press_within_one_tick(self, model, board, sync, mock_output):
        """A reset followed by a new press before the next sync is still noticed."""
        model = update(model, PointerPressed(CENTER))
        sync.reconcile(model)
        mock_output.send.reset_mock()

        model = update(model, PointerReleased())
        model = update(model, PointerPressed(pixel_of(board, AxialCoord(1, 0))))

        assert sync.reconcile(model) is SyncAction.RESET_AND_APPEND
        assert sent(mock_output) == [("note_off", 60), ("note_on", 62)]
        assert sync.sounding_notes == (2,)

    @pytest.mark.unit
    def test_shrink_without_reset_is_rejected(self, board, sync):
        sync.reconcile(Model(board=board, active_steps=(0, 2)))
        with pytest.raises(DeviceSyncError):
            sync.reconcile(Model(board=board, active_steps=(0,)))


class TestKeyRange:
    """Test steps that fall outside the MIDI key range."""

    @pytest.mark.unit
    def test_key_of(self, sync):
        assert sync.key_of(0) == 60
        assert sync.key_of(67) == 127
        assert sync.key_of(68) is None
        assert sync.key_of(-60) == 0
        assert sync.key_of(-61) is None

    @pytest.mark.unit
    def test_out_of_range_tracked_but_not_sent(self, board, mock_output):
        sync = DeviceSync(mock_output, base_key=120)
        model = Model(board=board, active_steps=(0, 10, 5))

        sync.reconcile(model)
        assert sent(mock_output) == [("note_on", 120), ("note_on", 125)]
        assert sync.sounding_notes == (0, 10, 5)

        mock_output.send.reset_mock()
        sync.reconcile(Model(board=board, generation=1))
        assert sent(mock_output) == [("note_off", 120), ("note_off", 125)]


class TestBestEffort:
    """Test that device failures never disturb bookkeeping."""

    @pytest.fixture
    def failing_output(self):
        port = Mock()
        port.send = Mock(side_effect=OSError("device gone"))
        output = MidiOutput()
        output.attach(port)
        return output

    @pytest.mark.unit
    def test_send_failure_swallowed(self, failing_output):
        assert failing_output.send(mido.Message("note_on", note=60)) is False

    @pytest.mark.unit
    def test_bookkeeping_advances_on_failure(self, model, failing_output):
        sync = DeviceSync(failing_output)
        model = update(update(model, PointerPressed(CENTER)), PointerPressed(CENTER))
        sync.reconcile(model)
        assert sync.sounding_notes == (0, 0)

        sync.reconcile(update(model, PointerReleased()))
        assert sync.sounding_notes == ()

    @pytest.mark.unit
    def test_send_without_port(self):
        assert MidiOutput().send(mido.Message("note_on", note=60)) is False

    @pytest.mark.unit
    def test_panic_sends_every_key(self, sync, mock_output):
        sync.panic()
        notes = sent(mock_output)
        assert len(notes) == 128
        assert {kind for kind, _ in notes} == {"note_off"}
        assert [n for _, n in notes] == list(range(128))

    @pytest.mark.unit
    def test_close_silences_and_closes(self, model, sync, mock_output):
        sync.reconcile(update(model, PointerPressed(CENTER)))
        mock_output.send.reset_mock()

        sync.close()
        assert sent(mock_output) == [("note_off", 60)]
        mock_output.close.assert_called_once()


class TestMidiOutput:
    """Test port selection."""

    @pytest.fixture
    def fake_mido(self):
        with patch("hexkeys.midi.output.mido") as fake:
            fake.get_output_names.return_value = ["Midi Through:0", "FluidSynth:0"]
            fake.open_output.side_effect = lambda name: Mock(name=name)
            yield fake

    @pytest.mark.unit
    def test_first_port_by_default(self, fake_mido):
        output = MidiOutput()
        assert output.open() is True
        fake_mido.open_output.assert_called_once_with("Midi Through:0")
        assert output.is_connected

    @pytest.mark.unit
    def test_partial_name(self, fake_mido):
        output = MidiOutput()
        assert output.open("Fluid") is True
        fake_mido.open_output.assert_called_once_with("FluidSynth:0")

    @pytest.mark.unit
    def test_unknown_name(self, fake_mido):
        with pytest.raises(ConfigValidationError) as exc_info:
            MidiOutput().open("Nope")
        assert exc_info.value.field == "midi_port"

    @pytest.mark.unit
    def test_ambiguous_name(self, fake_mido):
        with pytest.raises(ConfigValidationError):
            MidiOutput().open(":0")

    @pytest.mark.unit
    def test_no_ports(self, fake_mido):
        fake_mido.get_output_names.return_value = []
        output = MidiOutput()
        assert output.open() is False
        assert not output.is_connected

    @pytest.mark.unit
    def test_open_failure(self, fake_mido):
        fake_mido.open_output.side_effect = OSError("busy")
        output = MidiOutput()
        assert output.open() is False
        assert output.current_port is None

    @pytest.mark.unit
    def test_port_selector(self, fake_mido):
        output = MidiOutput(port_selector=lambda names: names[-1])
        output.open()
        fake_mido.open_output.assert_called_once_with("FluidSynth:0")
