"""Request-scoped access to the shared database and repositories."""

from fastapi import Request

from ..config import Settings
from ..db.engine import Database
from ..db.repositories import (
    ProgressionRepository,
    SetRepository,
    SummaryRepository,
    WorkoutRepository,
)
from ..services.progression import ProgressionService


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Get the database handle from app state."""
    return request.app.state.database


def get_workout_repository(request: Request) -> WorkoutRepository:
    return WorkoutRepository(get_database(request))


def get_set_repository(request: Request) -> SetRepository:
    return SetRepository(get_database(request))


def get_summary_repository(request: Request) -> SummaryRepository:
    return SummaryRepository(
        get_database(request), window_hours=get_settings(request).window_hours
    )


def get_progression_service(request: Request) -> ProgressionService:
    window_hours = get_settings(request).window_hours
    database = get_database(request)
    return ProgressionService(
        SummaryRepository(database, window_hours=window_hours),
        ProgressionRepository(database, window_hours=window_hours),
    )
