"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from hexkeys import __version__

from .commands import config, layouts, midi_group

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".hexkeys" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "hexkeys-debug.log"
    return LOG_DIR / "hexkeys.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used with a custom log file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="hexkeys")
@click.option(
    '--edo',
    type=int,
    default=None,
    help='Use a predefined layout for a specific EDO (12, 31 or 53)'
)
@click.option(
    '--layout',
    'layout_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Load the layout from a JSON description (overrides --edo)'
)
@click.option(
    '--port',
    '-p',
    type=str,
    default=None,
    help='MIDI output port name (default: from config, else first available)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./hexkeys-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    edo: Optional[int],
    layout_file: Optional[Path],
    port: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Hexkeys - a microtonal hexagonal keyboard for MIDI synths.

    Click or tap hexagons to play. Hold SPACE to sustain: notes keep
    sounding after the mouse is released until SPACE is let go.

    \b
    Examples:
      # 31-EDO layout on the first MIDI output
      hexkeys

      # 12-EDO on a named port
      hexkeys --edo 12 --port FluidSynth

      # Custom layout description
      hexkeys --layout my-layout.json

      # List MIDI outputs
      hexkeys midi list
    """
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports keep subcommands free of pygame start-up cost
    from hexkeys.core.application import Application
    from hexkeys.midi import DeviceSync, MidiOutput
    from hexkeys.models import AppConfig, load_layout

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting hexkeys")

    sync = None
    try:
        config_obj = AppConfig.load_or_default()
        layout = load_layout(
            layout_file, edo if edo is not None else config_obj.default_edo
        )

        output = MidiOutput()
        output.open(port if port is not None else config_obj.midi_port)
        sync = DeviceSync(
            output,
            base_key=config_obj.base_key,
            velocity=config_obj.velocity,
            channel=config_obj.channel,
        )

        app = Application.from_config(config_obj, layout, sync)
        app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        from hexkeys.exceptions import format_error_for_display

        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)
    finally:
        if sync is not None:
            sync.close()


cli.add_command(midi_group)
cli.add_command(layouts)
cli.add_command(config)

if __name__ == "__main__":
    cli()
