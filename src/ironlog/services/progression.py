"""Progression eligibility and application."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from ..db.repositories import ProgressionRepository, SummaryRepository
from ..models.workout import Exercise, ProgressionCandidate, WorkoutSet

logger = logging.getLogger(__name__)


def evaluate(exercise: Exercise, sets: Sequence[WorkoutSet]) -> bool:
    """Decide whether an exercise has earned a weight increase.

    An exercise qualifies when it has at least ``target_sets`` sets in the
    window and every one of them reaches ``target_reps`` at no less than
    ``current_weight``. A single short set disqualifies it.
    """
    if len(sets) < exercise.target_sets:
        return False
    return all(
        s.reps >= exercise.target_reps and s.weight >= exercise.current_weight
        for s in sets
    )


def evaluate_all(candidates: Iterable[ProgressionCandidate]) -> list[Exercise]:
    """Return the candidate exercises that qualify for progression."""
    return [c.exercise for c in candidates if evaluate(c.exercise, c.sets)]


class ProgressionService:
    """Finds eligible exercises for a user and applies progressions."""

    def __init__(self, summaries: SummaryRepository, progressions: ProgressionRepository):
        self.summaries = summaries
        self.progressions = progressions

    async def eligible_exercises(
        self, user_id: int, now: datetime | None = None
    ) -> list[Exercise]:
        """Exercises of the user that currently qualify for progression."""
        candidates = await self.summaries.get_progression_candidates(user_id, now=now)
        for candidate in candidates:
            logger.debug(
                "Exercise %s has %d set(s) in window (target %d)",
                candidate.exercise.exercise_id,
                len(candidate.sets),
                candidate.exercise.target_sets,
            )

        eligible = evaluate_all(candidates)
        logger.info(
            "User %s: %d of %d candidate exercise(s) eligible",
            user_id,
            len(eligible),
            len(candidates),
        )
        return eligible

    async def apply(
        self,
        exercise_ids: Sequence[int],
        verify: bool = False,
        now: datetime | None = None,
    ) -> None:
        """Apply one weight increment per listed exercise id.

        Not idempotent. With ``verify`` each exercise is re-evaluated in the
        same transaction as its increment, so sets recorded (or missing)
        since the eligibility check are taken into account.
        """
        await self.progressions.apply(
            exercise_ids, check=evaluate if verify else None, now=now
        )
