"""
Heatmap API request / response schemas.

Requests carry the workout logs themselves (and optionally the user's
exercise catalog); nothing is looked up server-side except the built-in
catalog, which is used when ``catalog`` is omitted.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.heatmap.aggregator import SkippedEntry
from app.heatmap.catalog import OnMissingExercise
from app.heatmap.normalizer import NormalizationMode
from app.heatmap.timeline import DailyChartGroupVolume
from app.heatmap.views import RankedMuscle
from app.schemas.muscle import ChartGroup, MuscleGroup
from app.schemas.workout import DateRange, ExerciseDefinition, WorkoutLog, WorkoutLogEntry


class HeatmapRequest(BaseModel):
    """Compute a body heatmap over a date range."""

    logs: list[WorkoutLog] = Field(default_factory=list, description="Workout logs, any order")
    catalog: Optional[list[ExerciseDefinition]] = Field(
        None, description="Exercise definitions (built-in catalog if omitted)",
    )
    range: Optional[DateRange] = Field(None, description="Inclusive window (current week if omitted)")
    mode: Optional[NormalizationMode] = Field(None, description="Normalization mode (server default if omitted)")
    on_missing_exercise: Optional[OnMissingExercise] = Field(
        None, description="skip or abort on unknown exercises (server default if omitted)",
    )


class HeatmapResponse(BaseModel):
    """Raw totals, intensities and the per-view rankings for the body diagram."""

    range: DateRange
    mode: NormalizationMode
    raw: dict[MuscleGroup, float] = Field(..., description="Load per muscle group")
    intensities: dict[MuscleGroup, float] = Field(..., description="Intensity in [0, 1] per muscle group")
    front: list[RankedMuscle] = Field(..., description="Engaged front-view muscles, most intense first")
    back: list[RankedMuscle] = Field(..., description="Engaged back-view muscles, most intense first")
    engaged_chart_groups: list[ChartGroup] = Field(
        ..., description="Union of the workout pills of every log in range, sorted",
    )
    logs_in_range: int
    skipped_entries: list[SkippedEntry] = Field(default_factory=list)


class MusclePillsRequest(BaseModel):
    """Chart-group pills for one workout's entries."""

    entries: list[WorkoutLogEntry] = Field(default_factory=list)
    catalog: Optional[list[ExerciseDefinition]] = None


class MusclePillsResponse(BaseModel):
    chart_groups: list[ChartGroup] = Field(..., description="Alphabetically sorted")


class DailyVolumeRequest(BaseModel):
    """Per-day chart-group volume over a date range."""

    logs: list[WorkoutLog] = Field(default_factory=list)
    catalog: Optional[list[ExerciseDefinition]] = None
    range: Optional[DateRange] = None
    on_missing_exercise: Optional[OnMissingExercise] = None


class DailyVolumeResponse(BaseModel):
    range: DateRange
    days: list[DailyChartGroupVolume]
