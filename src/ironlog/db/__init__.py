"""Database layer for ironlog."""

from .engine import Database, get_db_path, init_db
from .repositories import (
    ProgressionRepository,
    SetRepository,
    SummaryRepository,
    WorkoutRepository,
)

__all__ = [
    "Database",
    "get_db_path",
    "init_db",
    "ProgressionRepository",
    "SetRepository",
    "SummaryRepository",
    "WorkoutRepository",
]
