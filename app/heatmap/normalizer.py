"""
Normalizer — raw engagement totals → heatmap intensities in [0, 1].

Two modes:

* :class:`FixedCeiling` — ``min(1, raw / ceiling)``.  Comparable across
  weeks: the same absolute volume always gets the same colour.
* :class:`RelativeToMax` — ``raw / max(raw)``.  The most-worked muscle
  is always 1.0; everything else is relative to it.  An all-zero input
  stays all-zero (no division by zero).

Both modes clamp to [0, 1].  Normalizing a ``RelativeToMax`` result
again with ``RelativeToMax`` returns it unchanged.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from app.heatmap.taxonomy import MuscleGroup
from app.schemas.engagement import MuscleEngagementMap


class FixedCeiling(BaseModel):
    """Divide by a fixed ceiling, saturating at 1.0."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    ceiling: float = Field(..., gt=0.0, allow_inf_nan=False, description="Raw value mapped to 1.0")


class RelativeToMax(BaseModel):
    """Divide by the largest component of the input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["relative"] = "relative"


NormalizationMode = Annotated[
    Union[FixedCeiling, RelativeToMax],
    Field(discriminator="kind"),
]


def _clamp(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return min(1.0, max(0.0, value))


def normalize(raw: MuscleEngagementMap, mode: NormalizationMode) -> MuscleEngagementMap:
    """Rescale *raw* to intensities in [0, 1].

    The key set of the result always equals the key set of *raw* (every
    muscle group).

    Args:
        raw: Raw totals from the aggregator.
        mode: :class:`FixedCeiling` or :class:`RelativeToMax`.

    Returns:
        A :class:`MuscleEngagementMap` with ``is_normalized=True``.
    """
    if isinstance(mode, FixedCeiling):
        divisor = mode.ceiling
    elif isinstance(mode, RelativeToMax):
        divisor = max(raw.engagement.values())
        if divisor <= 0.0:
            return MuscleEngagementMap(
                engagement={m: 0.0 for m in MuscleGroup}, is_normalized=True,
            )
    else:
        raise TypeError(f"Unsupported normalization mode: {mode!r}")

    return MuscleEngagementMap(
        engagement={m: _clamp(v / divisor) for m, v in raw.engagement.items()},
        is_normalized=True,
    )
