"""MIDI output port handling."""

import logging
from typing import Callable, Optional

import mido

from hexkeys.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class MidiOutput:
    """
    A single MIDI output port with best-effort sending.

    Sending never raises: a missing port or an I/O error is logged and
    reported through the return value only.
    """

    def __init__(
        self,
        port_selector: Optional[Callable[[list[str]], Optional[str]]] = None,
    ):
        """
        Initialize MIDI output.

        Args:
            port_selector: Optional function to select a port from the available
                          names. If None, selects the first available port.
        """
        self._port_selector = port_selector
        self._port: Optional[mido.ports.BaseOutput] = None

    @staticmethod
    def list_ports() -> list[str]:
        """Get available MIDI output port names."""
        return mido.get_output_names()

    def _find_port(self, port_name: Optional[str]) -> Optional[str]:
        available_ports = self.list_ports()

        if port_name is not None:
            if port_name in available_ports:
                return port_name
            # Accept a unique partial name such as "FluidSynth"
            matching_ports = [p for p in available_ports if port_name in p]
            if len(matching_ports) == 1:
                return matching_ports[0]
            raise ConfigValidationError(
                field="midi_port",
                value=port_name,
                error_msg=f"no single MIDI output port matches '{port_name}'",
            )

        if not available_ports:
            return None

        if self._port_selector:
            return self._port_selector(available_ports)

        return available_ports[0]

    def open(self, port_name: Optional[str] = None) -> bool:
        """
        Open a MIDI output port.

        Args:
            port_name: Exact or partial port name. If None, the first available
                      output is used, and no output at all is not an error.

        Returns:
            True if a port was opened

        Raises:
            ConfigValidationError: If `port_name` matches no single port
        """
        self.close()

        port = self._find_port(port_name)
        if port is None:
            logger.warning("No MIDI output port found, notes will not be sent")
            return False

        try:
            self._port = mido.open_output(port)
            logger.info(f"Connected to MIDI output: {port}")
            return True
        except Exception as e:
            logger.error(f"Failed to connect to {port}: {e}")
            self._port = None
            return False

    def attach(self, port: mido.ports.BaseOutput) -> None:
        """Use an already opened port (virtual ports, tests)."""
        self.close()
        self._port = port

    def send(self, message: mido.Message) -> bool:
        """
        Send MIDI message to device.

        Returns:
            True if sent successfully, False if not connected or the send failed
        """
        if self._port is None:
            return False
        try:
            self._port.send(message)
            return True
        except Exception as e:
            logger.debug(f"Error sending MIDI message {message}: {e}")
            return False

    def close(self) -> None:
        """Close the port if one is open."""
        if self._port is not None:
            try:
                self._port.close()
            except Exception as e:
                logger.error(f"Error closing MIDI output port: {e}")
            self._port = None

    @property
    def is_connected(self) -> bool:
        """Check if an output port is open."""
        return self._port is not None

    @property
    def current_port(self) -> Optional[str]:
        """Get currently connected port name."""
        return self._port.name if self._port else None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
