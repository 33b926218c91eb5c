"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from ironlog.db import (
    Database,
    ProgressionRepository,
    SetRepository,
    SummaryRepository,
    WorkoutRepository,
)
from ironlog.models.workout import ExerciseSpec


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def database(temp_db_path):
    """An initialized database in a temporary directory."""
    db = Database(temp_db_path)
    await db.init()
    return db


@pytest.fixture
def now():
    """Fixed evaluation time."""
    return datetime(2026, 10, 17, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def workout_repo(database):
    return WorkoutRepository(database)


@pytest.fixture
def set_repo(database):
    return SetRepository(database)


@pytest.fixture
def summary_repo(database):
    return SummaryRepository(database)


@pytest.fixture
def progression_repo(database):
    return ProgressionRepository(database)


@pytest.fixture
def sample_exercises():
    """A small push day."""
    return [
        ExerciseSpec(
            name="Bench Press",
            current_weight=100,
            target_sets=3,
            target_reps=8,
            weight_modifier=2.5,
        ),
        ExerciseSpec(
            name="Overhead Press",
            current_weight=50,
            target_sets=3,
            target_reps=5,
            weight_modifier=1.25,
        ),
    ]
