"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import Settings
from ..db import Database


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_settings(ctx: click.Context) -> Settings:
    """Settings loaded by the root command."""
    return ctx.find_object(Settings) or Settings.from_env()


def get_database(ctx: click.Context) -> Database:
    """Database handle for the configured path."""
    return Database(get_settings(ctx).database_path)


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_settings(ctx).database_path
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'ironlog init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
