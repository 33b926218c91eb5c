"""Web interface for ironlog."""

from .app import create_app

__all__ = ["create_app"]
