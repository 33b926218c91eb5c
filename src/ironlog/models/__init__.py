"""Data models for ironlog."""

from .workout import (
    Exercise,
    ExerciseSpec,
    ProgressionCandidate,
    SummaryRow,
    Workout,
    WorkoutSet,
)

__all__ = [
    "Exercise",
    "ExerciseSpec",
    "ProgressionCandidate",
    "SummaryRow",
    "Workout",
    "WorkoutSet",
]
