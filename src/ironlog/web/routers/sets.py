"""Set recording routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...db.repositories import SetRepository
from ...errors import IronlogError
from ..dependencies import get_set_repository
from ..schemas import SetCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sets"])


@router.post("/exercises/{exercise_id}/sets", status_code=201)
async def record_set(
    exercise_id: int,
    body: SetCreateRequest,
    repo: SetRepository = Depends(get_set_repository),
):
    """Record a completed set of an exercise."""
    try:
        set_id = await repo.create(exercise_id, body.weight, body.reps)
    except IronlogError as e:
        logger.error("Failed to record set for exercise %s: %s", exercise_id, e)
        raise HTTPException(status_code=500, detail="Failed to record set")

    return {"set_id": set_id}
