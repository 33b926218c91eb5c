"""Progression commands."""

import click

from ..db import ProgressionRepository, SummaryRepository
from ..errors import IronlogError
from ..services import ProgressionService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_database,
    get_settings,
)


def _service(ctx: click.Context) -> ProgressionService:
    database = get_database(ctx)
    window_hours = get_settings(ctx).window_hours
    return ProgressionService(
        SummaryRepository(database, window_hours=window_hours),
        ProgressionRepository(database, window_hours=window_hours),
    )


@click.group()
def progression():
    """Check and apply weight progressions."""
    pass


@progression.command("check")
@click.argument("user_id", type=int)
@click.pass_context
@async_command
async def check(ctx: click.Context, user_id: int):
    """Show the exercises of USER_ID that qualify for progression."""
    ensure_initialized(ctx)
    eligible = await _service(ctx).eligible_exercises(user_id)

    if not eligible:
        echo_info("No exercises ready to progress")
        return

    rows = [
        [e.exercise_id, e.name, e.current_weight, e.current_weight + e.weight_modifier]
        for e in eligible
    ]
    click.echo(format_table(["ID", "Name", "Current", "Next"], rows))


@progression.command("apply")
@click.argument("exercise_ids", type=int, nargs=-1, required=True)
@click.option("--verify", is_flag=True, help="Re-check eligibility before applying")
@click.pass_context
@async_command
async def apply(ctx: click.Context, exercise_ids: tuple[int, ...], verify: bool):
    """Increase the working weight of EXERCISE_IDS by their modifier."""
    ensure_initialized(ctx)
    try:
        await _service(ctx).apply(list(exercise_ids), verify=verify)
    except IronlogError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Progressed {len(exercise_ids)} exercise(s)")
