"""Layout listing command."""

import click

from hexkeys.models import PRESET_LAYOUTS


@click.command(name="layouts")
def layouts():
    """List the predefined tuning layouts."""
    click.echo("Predefined layouts:\n")
    for edo, factory in sorted(PRESET_LAYOUTS.items()):
        layout = factory()
        click.echo(
            f"  --edo {edo:<3} {layout.name:<6} q={layout.q_weight:<2} "
            f"r={layout.r_weight:<2} {layout.palette_size} colors"
        )
