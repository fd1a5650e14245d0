"""MIDI command implementations."""

import logging
from typing import Optional

import click

from hexkeys.midi import DeviceSync, MidiOutput
from hexkeys.models import AppConfig

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI output ports."""
    ports = MidiOutput.list_ports()

    click.echo("MIDI Output Ports:\n")
    if not ports:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports):
            click.echo(f"  [{i}] {port}")


@midi_group.command(name="panic")
@click.option('--port', '-p', type=str, default=None, help='MIDI output port name')
def panic(port: Optional[str]):
    """Send note-off for every key, silencing stuck notes.

    Uses the configured channel, and the configured port unless --port is given.
    """
    from hexkeys.exceptions import HexKeysError

    with MidiOutput() as output:
        try:
            cfg = AppConfig.load_or_default()
            opened = output.open(port if port is not None else cfg.midi_port)
        except HexKeysError as e:
            raise click.ClickException(e.get_full_message()) from e
        if not opened:
            raise click.ClickException("No MIDI output port available")

        DeviceSync(output, channel=cfg.channel).panic()
        click.echo(f"Sent note-off for all keys on {output.current_port}, channel {cfg.channel + 1}")
