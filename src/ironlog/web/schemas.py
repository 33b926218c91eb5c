"""Request body schemas for the HTTP API."""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..db.engine import SQLITE_MAX_INTEGER
from ..models.workout import ExerciseSpec

RowId = Annotated[int, Field(ge=1, le=SQLITE_MAX_INTEGER)]


class ExerciseIn(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(min_length=1)
    current_weight: float = Field(ge=0)
    target_sets: int = Field(ge=0)
    target_reps: int = Field(ge=0)
    # Intended positive; negative values are accepted for deloads
    weight_modifier: float

    def to_spec(self) -> ExerciseSpec:
        return ExerciseSpec(
            name=self.name,
            current_weight=self.current_weight,
            target_sets=self.target_sets,
            target_reps=self.target_reps,
            weight_modifier=self.weight_modifier,
        )


class WorkoutCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    exercises: list[ExerciseIn] = Field(default_factory=list)


class WorkoutUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    exercises: Optional[list[ExerciseIn]] = None


class SetCreateRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    weight: float = Field(ge=0)
    reps: int = Field(ge=0)


class ProgressionRequest(BaseModel):
    exercise_ids: list[RowId]
    verify: bool = False
