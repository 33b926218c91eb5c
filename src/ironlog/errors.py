"""Exception hierarchy for ironlog."""


class IronlogError(Exception):
    """Base class for all ironlog errors."""


class NotFoundError(IronlogError):
    """A referenced row does not exist."""


class WorkoutNotFoundError(NotFoundError):
    """Raised when a workout id does not exist."""

    def __init__(self, workout_id: int):
        self.workout_id = workout_id
        super().__init__(f"Workout {workout_id} not found")


class ExerciseNotFoundError(NotFoundError):
    """Raised when an exercise id does not exist."""

    def __init__(self, exercise_id: int):
        self.exercise_id = exercise_id
        super().__init__(f"Exercise {exercise_id} not found")


class ConstraintViolationError(IronlogError):
    """A referential or shape constraint was rejected by the store."""


class TransientStoreError(IronlogError):
    """The store failed for an operational reason (locked, I/O, ...)."""


class ProgressionNotEligibleError(IronlogError):
    """Raised when a verified progression no longer meets its targets."""

    def __init__(self, exercise_id: int):
        self.exercise_id = exercise_id
        super().__init__(f"Exercise {exercise_id} is not eligible for progression")
