"""Pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from hexkeys.core import Model
from hexkeys.hexgrid import HexBoard, to_surface
from hexkeys.midi import DeviceSync, MidiOutput
from hexkeys.models import edo12_layout


def pixel_of(board: HexBoard, coord) -> tuple[float, float]:
    """Window pixel at the center of a cell (inverse of HexBoard.coord_at)."""
    width, height = board.viewport_size
    x, y = to_surface(coord, board.cell_pitch, board.layout.rotation_angle)
    return ((x + width) / 2.0, (height - y) / 2.0)


@pytest.fixture
def layout():
    """12-EDO preset layout."""
    return edo12_layout()


@pytest.fixture
def board(layout):
    """Board in a 960x600 viewport with default hexagon sizes."""
    return HexBoard(viewport_size=(960.0, 600.0), layout=layout)


@pytest.fixture
def model(board):
    """Fresh model with nothing pressed."""
    return Model(board=board)


@pytest.fixture
def mock_output():
    """MIDI output whose sends always succeed."""
    output = Mock(spec=MidiOutput)
    output.send = Mock(return_value=True)
    return output


@pytest.fixture
def sync(mock_output):
    """DeviceSync over the mock output, step 0 = middle C."""
    return DeviceSync(mock_output, base_key=60, velocity=64)


def sent(mock_output) -> list[tuple[str, int]]:
    """(type, note) of every message sent through a mock output."""
    return [(c.args[0].type, c.args[0].note) for c in mock_output.send.call_args_list]
