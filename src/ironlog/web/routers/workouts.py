"""Workout routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...db.repositories import WorkoutRepository
from ...errors import IronlogError, WorkoutNotFoundError
from ..dependencies import get_workout_repository
from ..schemas import WorkoutCreateRequest, WorkoutUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workouts"])


@router.post("/users/{user_id}/workouts", status_code=201)
async def create_workout(
    user_id: int,
    body: WorkoutCreateRequest,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Create a workout routine together with its exercises."""
    try:
        workout_id = await repo.create(
            user_id, body.name, [e.to_spec() for e in body.exercises]
        )
    except IronlogError as e:
        logger.error("Failed to create workout for user %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to create workout")

    return {"workout_id": workout_id, "message": "Workout created successfully"}


@router.get("/users/{user_id}/workouts")
async def list_workouts(
    user_id: int,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """List all workouts belonging to a user."""
    try:
        workouts = await repo.list_for_user(user_id)
    except IronlogError as e:
        logger.error("Failed to list workouts for user %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Error fetching this user's workouts")

    return [w.to_dict() for w in workouts]


@router.get("/workouts/{workout_id}/exercises")
async def list_exercises(
    workout_id: int,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """List all exercises belonging to a workout."""
    try:
        exercises = await repo.list_exercises(workout_id)
    except IronlogError as e:
        logger.error("Failed to list exercises of workout %s: %s", workout_id, e)
        raise HTTPException(status_code=500, detail="Error fetching this workout's exercises")

    return [e.to_dict() for e in exercises]


@router.put("/workouts/{workout_id}")
async def update_workout(
    workout_id: int,
    body: WorkoutUpdateRequest,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Rename a workout and/or replace its exercise list."""
    exercises = [e.to_spec() for e in body.exercises] if body.exercises else None
    try:
        await repo.update(workout_id, name=body.name, exercises=exercises)
    except WorkoutNotFoundError:
        raise HTTPException(status_code=404, detail="Workout not found")
    except IronlogError as e:
        logger.error("Failed to modify workout %s: %s", workout_id, e)
        raise HTTPException(status_code=500, detail="Failed to modify workout")

    return {"message": "Workout modified successfully"}


@router.delete("/workouts/{workout_id}")
async def delete_workout(
    workout_id: int,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Delete a workout with its exercises and sets."""
    try:
        await repo.delete(workout_id)
    except IronlogError as e:
        logger.error("Failed to delete workout %s: %s", workout_id, e)
        raise HTTPException(status_code=500, detail="Failed to delete workout")

    return {"message": "Workout successfully deleted"}
