"""Output device exceptions."""

from .base import HexKeysError


class DeviceSyncError(HexKeysError):
    """The device mirror can no longer be reconciled with the model.

    Raised when notes disappeared from the model without a full reset,
    which the reducer never produces. Not recoverable: it means the
    model was modified outside the reducer.
    """

    def __init__(self, active: int, sounding: int):
        super().__init__(
            user_message="Sounding notes are out of sync with the keyboard state",
            technical_message=(
                f"Active steps shrank without a reset: active={active}, sounding={sounding}"
            ),
            recoverable=False,
        )
        self.active = active
        self.sounding = sounding
