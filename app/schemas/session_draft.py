"""
In-progress workout session draft.

While a workout is being logged the client keeps a draft (which
exercises, which sets so far) so that a reload or a crash does not lose
it.  A draft is only turned into a :class:`~app.schemas.workout.WorkoutLog`
once the workout is finished.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.workout import LoggedSet, UTCDateTime


class WorkoutSessionDraft(BaseModel):
    """Sets logged so far for one running workout."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    workout_id: str = Field(..., validation_alias=AliasChoices("workout_id", "workoutId"))
    workout_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("workout_name", "workoutName"),
    )
    started_at: UTCDateTime = Field(
        ...,
        validation_alias=AliasChoices("started_at", "startedAt", "startTime"),
        description="When the session was started (UTC)",
    )
    session_log: dict[str, list[LoggedSet]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("session_log", "sessionLog"),
        description="Exercise id → sets logged so far, in exercise order",
    )
    exercise_names: dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("exercise_names", "exerciseNames"),
        description="Exercise id → display name, for exercises without a catalog id",
    )
