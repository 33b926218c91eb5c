"""Data access layer for ironlog."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

import aiosqlite

from ..config import DEFAULT_WINDOW_HOURS
from ..errors import (
    ExerciseNotFoundError,
    ProgressionNotEligibleError,
    WorkoutNotFoundError,
)
from ..models.workout import (
    Exercise,
    ExerciseSpec,
    ProgressionCandidate,
    SummaryRow,
    Workout,
    WorkoutSet,
)
from .engine import (
    Database,
    build_batch_insert,
    from_db_timestamp,
    to_db_timestamp,
    utcnow,
)

logger = logging.getLogger(__name__)

EXERCISE_COLUMNS = (
    "workout_id",
    "name",
    "current_weight",
    "target_sets",
    "target_reps",
    "weight_modifier",
)

EligibilityCheck = Callable[[Exercise, list[WorkoutSet]], bool]


def _row_to_workout(row: aiosqlite.Row) -> Workout:
    return Workout(
        workout_id=row["workout_id"],
        user_id=row["user_id"],
        name=row["name"],
        created_at=from_db_timestamp(row["created_at"]),
    )


def _row_to_exercise(row: aiosqlite.Row) -> Exercise:
    return Exercise(
        exercise_id=row["exercise_id"],
        workout_id=row["workout_id"],
        name=row["name"],
        current_weight=row["current_weight"],
        target_sets=row["target_sets"],
        target_reps=row["target_reps"],
        weight_modifier=row["weight_modifier"],
    )


def _row_to_set(row: aiosqlite.Row) -> WorkoutSet:
    return WorkoutSet(
        set_id=row["set_id"],
        exercise_id=row["exercise_id"],
        weight=row["weight"],
        reps=row["reps"],
        created_at=from_db_timestamp(row["created_at"]),
    )


async def _insert_exercises(
    db: aiosqlite.Connection, workout_id: int, exercises: Sequence[ExerciseSpec]
) -> None:
    """Insert all exercises for a workout with one parameterized statement."""
    sql, params = build_batch_insert(
        "exercises",
        EXERCISE_COLUMNS,
        [exercise.to_row(workout_id) for exercise in exercises],
    )
    await db.execute(sql, params)


class WindowedRepository:
    """Base for queries restricted to a trailing time window."""

    def __init__(self, database: Database, window_hours: float = DEFAULT_WINDOW_HOURS):
        self.database = database
        self.window = timedelta(hours=window_hours)

    def window_start(self, now: datetime | None = None) -> str:
        """Encoded lower bound of the window ending at ``now``."""
        return to_db_timestamp((now or utcnow()) - self.window)


class WorkoutRepository:
    """Repository for workouts and their exercise lists."""

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        user_id: int,
        name: str,
        exercises: Sequence[ExerciseSpec],
        created_at: datetime | None = None,
    ) -> int:
        """Create a workout and all of its exercises as one unit."""
        async with self.database.transaction() as db:
            cursor = await db.execute(
                "INSERT INTO workouts (user_id, name, created_at) VALUES (?, ?, ?)",
                (user_id, name, to_db_timestamp(created_at or utcnow())),
            )
            workout_id = cursor.lastrowid

            if exercises:
                await _insert_exercises(db, workout_id, exercises)

        logger.info(
            "Created workout %s for user %s with %d exercises",
            workout_id,
            user_id,
            len(exercises),
        )
        return workout_id

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout by ID."""
        async with self.database.connection() as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE workout_id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return _row_to_workout(row)

    async def list_for_user(self, user_id: int) -> list[Workout]:
        """List a user's workouts in insertion order."""
        async with self.database.connection() as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE user_id = ? ORDER BY workout_id",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [_row_to_workout(row) for row in rows]

    async def list_exercises(self, workout_id: int) -> list[Exercise]:
        """List the exercises of a workout."""
        async with self.database.connection() as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE workout_id = ? ORDER BY exercise_id",
                (workout_id,),
            )
            rows = await cursor.fetchall()
            return [_row_to_exercise(row) for row in rows]

    async def update(
        self,
        workout_id: int,
        name: str | None = None,
        exercises: Sequence[ExerciseSpec] | None = None,
    ) -> None:
        """Rename a workout and/or replace its whole exercise list.

        Raises:
            WorkoutNotFoundError: if the workout does not exist. Nothing is
                written in that case, including the rename.
        """
        async with self.database.transaction() as db:
            if name:
                await db.execute(
                    "UPDATE workouts SET name = ? WHERE workout_id = ?",
                    (name, workout_id),
                )

            cursor = await db.execute(
                "SELECT workout_id FROM workouts WHERE workout_id = ?", (workout_id,)
            )
            if await cursor.fetchone() is None:
                raise WorkoutNotFoundError(workout_id)

            if exercises:
                await db.execute(
                    "DELETE FROM exercises WHERE workout_id = ?", (workout_id,)
                )
                await _insert_exercises(db, workout_id, exercises)

        logger.info(
            "Updated workout %s (renamed=%s, exercises replaced=%s)",
            workout_id,
            bool(name),
            bool(exercises),
        )

    async def delete(self, workout_id: int) -> None:
        """Delete a workout; exercises and sets go with it."""
        async with self.database.connection() as db:
            await db.execute("DELETE FROM workouts WHERE workout_id = ?", (workout_id,))
        logger.info("Deleted workout %s", workout_id)


class SetRepository:
    """Repository for recorded sets."""

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        exercise_id: int,
        weight: float,
        reps: int,
        created_at: datetime | None = None,
    ) -> int:
        """Record a completed set."""
        async with self.database.connection() as db:
            cursor = await db.execute(
                """
                INSERT INTO sets (exercise_id, weight, reps, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (exercise_id, weight, reps, to_db_timestamp(created_at or utcnow())),
            )
            return cursor.lastrowid

    async def list_for_exercise(self, exercise_id: int) -> list[WorkoutSet]:
        """List all sets of an exercise, oldest first."""
        async with self.database.connection() as db:
            cursor = await db.execute(
                "SELECT * FROM sets WHERE exercise_id = ? ORDER BY created_at, set_id",
                (exercise_id,),
            )
            rows = await cursor.fetchall()
            return [_row_to_set(row) for row in rows]


class SummaryRepository(WindowedRepository):
    """Aggregations over a user's recent performance."""

    async def get_workout_summary(
        self, user_id: int, now: datetime | None = None
    ) -> list[SummaryRow]:
        """Summarize the in-window sets of the user's most recent workout.

        The most recent workout is the one with the greatest ``created_at``;
        on an exact tie the latest inserted (highest ``workout_id``) wins.
        """
        async with self.database.connection() as db:
            cursor = await db.execute(
                """
                SELECT
                    w.workout_id AS workout_id,
                    w.name AS workout_name,
                    e.exercise_id AS exercise_id,
                    e.name AS exercise_name,
                    s.weight AS weight,
                    s.reps AS reps,
                    s.created_at AS created_at
                FROM workouts w
                INNER JOIN exercises e ON w.workout_id = e.workout_id
                INNER JOIN sets s ON e.exercise_id = s.exercise_id
                WHERE w.workout_id = (
                        SELECT workout_id FROM workouts
                        WHERE user_id = ?
                        ORDER BY created_at DESC, workout_id DESC
                        LIMIT 1
                    )
                    AND s.created_at >= ?
                ORDER BY e.name, s.created_at, s.set_id
                """,
                (user_id, self.window_start(now)),
            )
            rows = await cursor.fetchall()
            return [
                SummaryRow(
                    workout_id=row["workout_id"],
                    workout_name=row["workout_name"],
                    exercise_id=row["exercise_id"],
                    exercise_name=row["exercise_name"],
                    weight=row["weight"],
                    reps=row["reps"],
                    created_at=from_db_timestamp(row["created_at"]),
                )
                for row in rows
            ]

    async def get_progression_candidates(
        self, user_id: int, now: datetime | None = None
    ) -> list[ProgressionCandidate]:
        """Collect exercises with in-window sets, each with those sets."""
        async with self.database.connection() as db:
            # Stage 1: every in-window set under any of the user's workouts
            cursor = await db.execute(
                """
                SELECT s.*
                FROM sets s
                INNER JOIN exercises e ON s.exercise_id = e.exercise_id
                INNER JOIN workouts w ON e.workout_id = w.workout_id
                WHERE s.created_at >= ? AND w.user_id = ?
                ORDER BY s.created_at, s.set_id
                """,
                (self.window_start(now), user_id),
            )
            sets = [_row_to_set(row) for row in await cursor.fetchall()]
            if not sets:
                return []

            # Stage 2: the distinct exercises referenced by those sets
            exercise_ids = sorted({s.exercise_id for s in sets})
            placeholders = ", ".join("?" for _ in exercise_ids)
            cursor = await db.execute(
                f"""
                SELECT * FROM exercises
                WHERE exercise_id IN ({placeholders})
                ORDER BY exercise_id
                """,
                tuple(exercise_ids),
            )
            exercises = [_row_to_exercise(row) for row in await cursor.fetchall()]

        return [
            ProgressionCandidate(
                exercise=exercise,
                sets=[s for s in sets if s.exercise_id == exercise.exercise_id],
            )
            for exercise in exercises
        ]


class ProgressionRepository(WindowedRepository):
    """Applies weight increments to exercises."""

    async def apply(
        self,
        exercise_ids: Sequence[int],
        check: EligibilityCheck | None = None,
        now: datetime | None = None,
    ) -> None:
        """Increase ``current_weight`` by ``weight_modifier`` for each id.

        Every occurrence of an id is applied, so repeating an id (or the
        call) repeats the increment. The whole list is one transaction: an
        unknown id, or an exercise rejected by ``check``, leaves every
        exercise unchanged.

        Args:
            exercise_ids: Exercises to progress, in application order.
            check: Optional eligibility rule re-evaluated against the
                exercise's in-window sets inside the same transaction.
            now: End of the eligibility window for ``check``.

        Raises:
            ExerciseNotFoundError: if an id does not exist.
            ProgressionNotEligibleError: if ``check`` rejects an exercise.
        """
        since = self.window_start(now)
        async with self.database.transaction() as db:
            for exercise_id in exercise_ids:
                if check is not None:
                    await self._verify(db, exercise_id, since, check)

                cursor = await db.execute(
                    """
                    UPDATE exercises
                    SET current_weight = current_weight + weight_modifier
                    WHERE exercise_id = ?
                    """,
                    (exercise_id,),
                )
                if cursor.rowcount == 0:
                    raise ExerciseNotFoundError(exercise_id)

        logger.info("Progressed %d exercise(s): %s", len(exercise_ids), list(exercise_ids))

    async def _verify(
        self,
        db: aiosqlite.Connection,
        exercise_id: int,
        since: str,
        check: EligibilityCheck,
    ) -> None:
        cursor = await db.execute(
            "SELECT * FROM exercises WHERE exercise_id = ?", (exercise_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            raise ExerciseNotFoundError(exercise_id)

        cursor = await db.execute(
            """
            SELECT * FROM sets
            WHERE exercise_id = ? AND created_at >= ?
            ORDER BY created_at, set_id
            """,
            (exercise_id, since),
        )
        sets = [_row_to_set(r) for r in await cursor.fetchall()]
        if not check(_row_to_exercise(row), sets):
            raise ProgressionNotEligibleError(exercise_id)
