"""Initialize project command."""

import click

from .base import async_command, echo_info, echo_success, get_database


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the ironlog database.

    Creates the data directory and the SQLite schema. Safe to run again on
    an existing database.
    """
    database = get_database(ctx)
    echo_info(f"Initializing ironlog at {database.path}")

    await database.init()
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  ironlog serve                # Start the HTTP API")
    click.echo("  ironlog progression check 1  # Exercises ready to progress")
