"""CLI commands for ironlog."""

from .init import init
from .progression import progression
from .serve import serve
from .workouts import workouts

__all__ = [
    "init",
    "progression",
    "serve",
    "workouts",
]
