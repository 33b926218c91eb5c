"""Progression application route."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...errors import IronlogError
from ...services.progression import ProgressionService
from ..dependencies import get_progression_service
from ..schemas import ProgressionRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["progression"])


@router.put("/progression")
async def apply_progression(
    body: ProgressionRequest,
    service: ProgressionService = Depends(get_progression_service),
):
    """Increase the working weight of each listed exercise."""
    try:
        await service.apply(body.exercise_ids, verify=body.verify)
    except IronlogError as e:
        logger.error("Failed to progress exercises %s: %s", body.exercise_ids, e)
        raise HTTPException(status_code=500, detail="Unable to progress workouts")

    return {"message": "Successfully progressed each exercise specified"}
