"""Pydantic schemas for request/response validation."""

from app.schemas.muscle import ActivityType, ChartGroup, MuscleGroup
from app.schemas.workout import (
    DateRange,
    ExerciseDefinition,
    LoggedSet,
    WorkoutLog,
    WorkoutLogEntry,
)
from app.schemas.engagement import MuscleEngagementMap
from app.schemas.session_draft import WorkoutSessionDraft

# app.schemas.heatmap depends on app.heatmap and is imported directly.

__all__ = [
    "ActivityType",
    "ChartGroup",
    "MuscleGroup",
    "DateRange",
    "ExerciseDefinition",
    "LoggedSet",
    "WorkoutLog",
    "WorkoutLogEntry",
    "MuscleEngagementMap",
    "WorkoutSessionDraft",
]
