"""Workout inspection commands."""

import click

from ..db import WorkoutRepository
from .base import async_command, echo_info, ensure_initialized, format_table, get_database


@click.group()
def workouts():
    """Inspect stored workouts."""
    pass


@workouts.command("list")
@click.argument("user_id", type=int)
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, user_id: int):
    """List the workouts of USER_ID."""
    ensure_initialized(ctx)
    repo = WorkoutRepository(get_database(ctx))
    items = await repo.list_for_user(user_id)

    if not items:
        echo_info(f"No workouts for user {user_id}")
        return

    rows = [
        [w.workout_id, w.name, w.created_at.strftime("%Y-%m-%d %H:%M") if w.created_at else ""]
        for w in items
    ]
    click.echo(format_table(["ID", "Name", "Created (UTC)"], rows))


@workouts.command("exercises")
@click.argument("workout_id", type=int)
@click.pass_context
@async_command
async def list_exercises(ctx: click.Context, workout_id: int):
    """List the exercises of WORKOUT_ID."""
    ensure_initialized(ctx)
    repo = WorkoutRepository(get_database(ctx))
    items = await repo.list_exercises(workout_id)

    if not items:
        echo_info(f"No exercises in workout {workout_id}")
        return

    rows = [
        [e.exercise_id, e.name, e.current_weight, f"{e.target_sets}x{e.target_reps}", e.weight_modifier]
        for e in items
    ]
    click.echo(format_table(["ID", "Name", "Weight", "Target", "Step"], rows))
