"""Application model and its pure update function."""

from dataclasses import dataclass, replace

from hexkeys.hexgrid import HexBoard

from .messages import (
    SUSTAIN_KEY,
    KeyEvent,
    KeyState,
    Message,
    PointerPressed,
    PointerReleased,
    ViewportResized,
)


@dataclass(frozen=True)
class Model:
    """Complete keyboard state after some sequence of messages.

    `active_steps` has exactly one entry per entry of `board.pressed`.
    `generation` counts how many times both were cleared, which lets the
    device mirror notice a reset that was followed by new presses within
    the same tick.
    """

    board: HexBoard
    active_steps: tuple[int, ...] = ()
    sustain: bool = False
    generation: int = 0


def _released(board: HexBoard, model: Model) -> Model:
    board.release_all()
    generation = model.generation + 1 if model.active_steps else model.generation
    return replace(model, board=board, active_steps=(), generation=generation)


def update(model: Model, message: Message) -> Model:
    """Return the model that results from applying one message.

    The input model is left untouched; the board is copied before any
    change.
    """
    if isinstance(message, ViewportResized):
        board = model.board.copy()
        board.viewport_size = message.size
        return replace(model, board=board)

    if isinstance(message, PointerPressed):
        board = model.board.copy()
        step = board.press(message.pos)
        return replace(model, board=board, active_steps=model.active_steps + (step,))

    if isinstance(message, PointerReleased):
        if model.sustain:
            return model
        return _released(model.board.copy(), model)

    if isinstance(message, KeyEvent) and message.key == SUSTAIN_KEY:
        if message.state is KeyState.PRESSED:
            return replace(model, sustain=True)
        return replace(_released(model.board.copy(), model), sustain=False)

    return model
