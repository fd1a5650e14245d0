"""Configuration commands."""

import click

from hexkeys.models import AppConfig


@click.group(name="config")
def config():
    """Show or initialize the configuration file."""
    pass


@config.command(name="show")
def show():
    """Print the effective configuration."""
    cfg = AppConfig.load_or_default()
    click.echo(f"# {AppConfig.default_path()}")
    click.echo(cfg.model_dump_json(indent=2))


@config.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing configuration file')
def init(force: bool):
    """Write the default configuration file."""
    path = AppConfig.default_path()
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    AppConfig().save(path)
    click.echo(f"Wrote {path}")
