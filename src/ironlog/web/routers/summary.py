"""Workout summary and progression eligibility routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...db.repositories import SummaryRepository
from ...errors import IronlogError
from ...services.progression import ProgressionService
from ..dependencies import get_progression_service, get_summary_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workout-summary", tags=["summary"])


@router.get("/progression/{user_id}")
async def eligible_exercises(
    user_id: int,
    service: ProgressionService = Depends(get_progression_service),
):
    """Exercises that met their targets and can be progressed."""
    try:
        exercises = await service.eligible_exercises(user_id)
    except IronlogError as e:
        logger.error("Failed to evaluate progression for user %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to get requested information")

    return [e.to_dict() for e in exercises]


@router.get("/{user_id}")
async def workout_summary(
    user_id: int,
    repo: SummaryRepository = Depends(get_summary_repository),
):
    """Recent sets of the user's latest workout."""
    try:
        rows = await repo.get_workout_summary(user_id)
    except IronlogError as e:
        logger.error("Failed to summarize workouts for user %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to get workout summary")

    return [r.to_dict() for r in rows]
