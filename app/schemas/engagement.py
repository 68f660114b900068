"""
Muscle engagement map schema.

The :class:`MuscleEngagementMap` is the output unit of the engine.  It
always carries one value per :class:`~app.schemas.muscle.MuscleGroup`:

- **raw** (``is_normalized=False``) — accumulated load per muscle, in the
  units of the logged volume (weight × reps, seconds or reps); unbounded.
- **normalized** (``is_normalized=True``) — intensity in [0.0, 1.0] ready
  for heatmap colouring.

The key set never varies with the input: an untouched muscle is ``0.0``,
never missing.
"""

from __future__ import annotations

import math
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.schemas.muscle import MuscleGroup

MUSCLE_GROUP_NAMES = [m.value for m in MuscleGroup]


class MuscleEngagementMap(BaseModel):
    """Per-muscle-group engagement, raw totals or normalized intensities."""

    model_config = ConfigDict(frozen=True)

    engagement: dict[MuscleGroup, float] = Field(
        ..., description="Value for every muscle group (0.0 when untouched)",
    )
    is_normalized: bool = Field(
        False, description="True once rescaled to intensities in [0, 1]",
    )

    @field_validator("engagement")
    @classmethod
    def validate_engagement(cls, value: dict[MuscleGroup, float]) -> dict[MuscleGroup, float]:
        missing = [m.value for m in MuscleGroup if m not in value]
        if missing:
            raise ValueError(f"Missing muscle groups: {missing}")
        negative = {m.value: v for m, v in value.items() if v < 0.0}
        if negative:
            raise ValueError(f"Negative engagement values: {negative}")
        non_finite = {m.value: v for m, v in value.items() if not math.isfinite(v)}
        if non_finite:
            raise ValueError(f"Non-finite engagement values: {non_finite}")
        # Stable enum order regardless of insertion order
        return {m: float(value[m]) for m in MuscleGroup}

    @model_validator(mode="after")
    def validate_intensity_bounds(self) -> Self:
        if self.is_normalized:
            over = {m.value: v for m, v in self.engagement.items() if v > 1.0}
            if over:
                raise ValueError(f"Normalized intensities above 1.0: {over}")
        return self

    # ------------------------------------------------------------------
    # Access helpers
    # ------------------------------------------------------------------

    def __getitem__(self, muscle: MuscleGroup | str) -> float:
        return self.engagement[MuscleGroup(muscle)]

    def max_component(self) -> tuple[MuscleGroup, float]:
        """Return ``(muscle, value)`` of the highest component."""
        muscle = max(self.engagement, key=self.engagement.get)  # type: ignore[arg-type]
        return muscle, self.engagement[muscle]

    def total(self) -> float:
        return sum(self.engagement.values())

    def is_zero(self) -> bool:
        return all(v == 0.0 for v in self.engagement.values())

    def as_dict(self) -> dict[str, float]:
        """Return as ``{muscle_name: value}`` in enum order."""
        return {m.value: v for m, v in self.engagement.items()}

    @classmethod
    def zero(cls) -> MuscleEngagementMap:
        """Return an all-zero raw map."""
        return cls(engagement={m: 0.0 for m in MuscleGroup})
