"""ironlog: workout tracking with automatic weight progression."""

__version__ = "0.1.0"
