"""Workout, exercise and set data models."""

from dataclasses import dataclass, field
from datetime import datetime


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class ExerciseSpec:
    """Input record for an exercise created with (or replacing into) a workout."""

    name: str
    current_weight: float
    target_sets: int
    target_reps: int
    weight_modifier: float

    def to_row(self, workout_id: int) -> tuple:
        """Column values in ``exercises`` insert order."""
        return (
            workout_id,
            self.name,
            self.current_weight,
            self.target_sets,
            self.target_reps,
            self.weight_modifier,
        )


@dataclass
class Workout:
    """A named collection of exercises owned by a user."""

    workout_id: int
    user_id: int
    name: str
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "workout_id": self.workout_id,
            "user_id": self.user_id,
            "name": self.name,
            "created_at": _iso(self.created_at),
        }


@dataclass
class Exercise:
    """A trackable movement within a workout.

    Carries the progression targets and the current working weight.
    """

    exercise_id: int
    workout_id: int
    name: str
    current_weight: float
    target_sets: int
    target_reps: int
    weight_modifier: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "workout_id": self.workout_id,
            "name": self.name,
            "current_weight": self.current_weight,
            "target_sets": self.target_sets,
            "target_reps": self.target_reps,
            "weight_modifier": self.weight_modifier,
        }


@dataclass
class WorkoutSet:
    """One recorded performance of an exercise."""

    set_id: int
    exercise_id: int
    weight: float
    reps: int
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "set_id": self.set_id,
            "exercise_id": self.exercise_id,
            "weight": self.weight,
            "reps": self.reps,
            "created_at": _iso(self.created_at),
        }


@dataclass
class SummaryRow:
    """One joined (workout, exercise, set) row of a workout summary."""

    workout_id: int
    workout_name: str
    exercise_id: int
    exercise_name: str
    weight: float
    reps: int
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "workout_id": self.workout_id,
            "workout_name": self.workout_name,
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "weight": self.weight,
            "reps": self.reps,
            "created_at": _iso(self.created_at),
        }


@dataclass
class ProgressionCandidate:
    """An exercise together with its sets inside the eligibility window."""

    exercise: Exercise
    sets: list[WorkoutSet] = field(default_factory=list)
