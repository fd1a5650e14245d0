"""Root of the hexkeys error hierarchy."""

from typing import Optional


class HexKeysError(Exception):
    """
    An error the CLI can explain to the player.

    `user_message` is what gets printed in the error box, `technical_message`
    is what goes to the log file, and `recovery_hint` (if any) is printed
    under the box. Errors marked `recoverable` are fixed by changing a flag,
    the config file or a layout file and starting again.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, for one-line reporters."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
