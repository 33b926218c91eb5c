"""CLI entry point for ironlog."""

import click

from . import __version__
from .commands import init, progression, serve, workouts
from .config import Settings, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="ironlog")
@click.pass_context
def main(ctx: click.Context):
    """ironlog: workout tracking with automatic weight progression.

    Example usage:

        # Initialize the database
        ironlog init

        # Serve the HTTP API
        ironlog serve

        # See which exercises are ready for more weight
        ironlog progression check 1
        ironlog progression apply 4 7
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    ctx.obj = settings


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(workouts)
main.add_command(progression)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
