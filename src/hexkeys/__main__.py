"""Main entry point for hexkeys."""

from hexkeys.cli import cli

if __name__ == "__main__":
    cli()
