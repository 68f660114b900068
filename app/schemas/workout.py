"""
Workout log schemas — the input side of the engagement engine.

Logs arrive from the logging subsystem as JSON-ish dicts (camelCase keys,
ISO date strings, sometimes sloppy numbers).  Everything is normalised
*here*, once, at the boundary:

* dates become timezone-aware UTC ``datetime`` instances,
* set metrics that are not finite, non-negative numbers become ``None``
  instead of failing validation — historical logs must always be
  displayable, even when imperfectly recorded.

The engine only ever sees the canonical shapes defined below.
"""

from __future__ import annotations

import datetime
import logging
import math
import re
from typing import Annotated, Any, Optional, Self

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from app.schemas.muscle import ActivityType

logger = logging.getLogger(__name__)


# ======================================================================
# Boundary coercion helpers
# ======================================================================


def _coerce_instant(value: Any) -> Any:
    """Turn ISO strings and bare dates into ``datetime`` instances."""
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value.strip())
    return value


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    """Attach UTC to naive instants, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


UTCDateTime = Annotated[
    datetime.datetime,
    BeforeValidator(_coerce_instant),
    AfterValidator(_as_utc),
]


def _coerce_metric(value: Any) -> Optional[float]:
    """Return *value* as a finite, non-negative float, or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            logger.debug("Discarding non-numeric set metric %r", value)
            return None
    if not isinstance(value, (int, float)):
        logger.debug("Discarding set metric of type %s", type(value).__name__)
        return None
    number = float(value)
    if not math.isfinite(number) or number < 0:
        logger.debug("Discarding out-of-range set metric %r", value)
        return None
    return number


# "45 min", "45min", "45:00" (mm:ss) or "1:02:30" (h:mm:ss)
_MINUTES_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*min", re.IGNORECASE)


def _coerce_duration(value: Any) -> Optional[float]:
    """Session duration in seconds from a number or a display string."""
    if isinstance(value, str):
        match = _MINUTES_RE.match(value)
        if match:
            return float(match.group(1)) * 60.0
        if ":" in value:
            parts = value.strip().split(":")
            try:
                numbers = [float(p) for p in parts]
            except ValueError:
                logger.debug("Discarding unparseable duration %r", value)
                return None
            seconds = 0.0
            for number in numbers:
                seconds = seconds * 60.0 + number
            # mm:ss for two parts, h:mm:ss for three
            return _coerce_metric(seconds)
    return _coerce_metric(value)


# ======================================================================
# Logged data
# ======================================================================


class LoggedSet(BaseModel):
    """One set of one exercise.

    Strength sets record ``weight`` and ``reps``; timed holds and cardio
    record ``duration_seconds``; bodyweight rep sets record ``reps`` only.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    weight: Optional[float] = Field(None, description="Load lifted per rep")
    reps: Optional[float] = Field(None, description="Repetitions performed")
    duration_seconds: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("duration_seconds", "durationSeconds", "duration"),
        description="Time under work in seconds (holds, cardio)",
    )

    @field_validator("weight", "reps", mode="before")
    @classmethod
    def coerce_metric(cls, value: Any) -> Optional[float]:
        return _coerce_metric(value)

    @field_validator("duration_seconds", mode="before")
    @classmethod
    def coerce_duration(cls, value: Any) -> Optional[float]:
        return _coerce_duration(value)


class WorkoutLogEntry(BaseModel):
    """One exercise within a logged workout, referenced by id and/or name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    exercise_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("exercise_id", "exerciseId"),
        description="Catalog exercise id (matched first)",
    )
    exercise_name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("exercise_name", "exerciseName"),
        description="Canonical exercise name (case-sensitive fallback match)",
    )
    sets: tuple[LoggedSet, ...] = Field(default=(), description="Sets in logged order")

    @model_validator(mode="after")
    def validate_exercise_reference(self) -> Self:
        if not self.exercise_id and not self.exercise_name:
            raise ValueError(
                "A log entry needs an exercise_id or an exercise_name."
            )
        return self


class WorkoutLog(BaseModel):
    """A completed workout — the unit of aggregation input.

    Pure cardio sessions may carry no exercises at all; their load then
    comes from ``activity_type`` and ``duration_seconds``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    date: UTCDateTime = Field(..., description="When the workout happened (UTC)")
    workout_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("workout_name", "workoutName"),
    )
    activity_type: Optional[ActivityType] = Field(
        None,
        validation_alias=AliasChoices("activity_type", "activityType"),
        description="Defaults to resistance when absent",
    )
    duration_seconds: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("duration_seconds", "durationSeconds", "duration"),
        description="Whole-session duration in seconds",
    )
    exercises: tuple[WorkoutLogEntry, ...] = Field(default=())

    @field_validator("duration_seconds", mode="before")
    @classmethod
    def coerce_duration(cls, value: Any) -> Optional[float]:
        return _coerce_duration(value)


# ======================================================================
# Catalog & range
# ======================================================================


class ExerciseDefinition(BaseModel):
    """Catalog entry an exercise reference is resolved against."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Unique catalog id")
    name: str = Field(..., description="Canonical, case-sensitive name")
    category: str = Field(..., description="Category label, e.g. 'Chest', 'Run'")
    target_muscles: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("target_muscles", "targetMuscles"),
        description="Optional display labels of targeted muscles, e.g. 'Lats'",
    )


def _end_of_day(value: Any) -> Any:
    """A calendar date used as an upper bound covers the whole day."""
    if isinstance(value, str) and len(value.strip()) == 10:
        value = datetime.date.fromisoformat(value.strip())
    if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
        return datetime.datetime.combine(value, datetime.time.max)
    return value


class DateRange(BaseModel):
    """Inclusive ``[start, end]`` window of UTC instants.

    A bare calendar date given as ``end`` means "through the end of that
    day"; as ``start`` it means midnight.
    """

    model_config = ConfigDict(frozen=True)

    start: UTCDateTime
    end: Annotated[UTCDateTime, BeforeValidator(_end_of_day)]

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.start > self.end:
            raise ValueError(
                f"Range start {self.start.isoformat()} is after end "
                f"{self.end.isoformat()}"
            )
        return self

    def contains(self, instant: datetime.datetime) -> bool:
        """Whether *instant* falls inside the range (bounds inclusive)."""
        return self.start <= instant <= self.end

    @classmethod
    def for_days(cls, first: datetime.date, last: datetime.date) -> DateRange:
        """Whole calendar days ``first`` through ``last`` (UTC)."""
        return cls(start=first, end=last)
