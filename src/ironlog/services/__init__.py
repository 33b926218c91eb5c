"""Domain services for ironlog."""

from .progression import ProgressionService, evaluate, evaluate_all

__all__ = ["ProgressionService", "evaluate", "evaluate_all"]
