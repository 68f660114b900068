"""
Front / back body views for the heatmap detail panel.

The body diagram is drawn twice, once from the front and once from the
back.  Each muscle group belongs to exactly one view.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from app.schemas.engagement import MuscleEngagementMap
from app.schemas.muscle import MuscleGroup

M = MuscleGroup

MUSCLE_DISPLAY_NAMES: dict[MuscleGroup, str] = {
    M.CHEST: "Chest",
    M.LATS: "Lats",
    M.TRAPS: "Traps",
    M.BACK_LOWER: "Lower Back",
    M.SHOULDERS_FRONT: "Front Shoulders",
    M.SHOULDERS_BACK: "Rear Shoulders",
    M.QUADS: "Quadriceps",
    M.GLUTES: "Glutes",
    M.HAMSTRINGS: "Hamstrings",
    M.CALVES: "Calves",
    M.BICEPS: "Biceps",
    M.TRICEPS: "Triceps",
    M.ABS: "Abs",
}


class BodyView(str, Enum):
    FRONT = "front"
    BACK = "back"


FRONT_MUSCLES: frozenset[MuscleGroup] = frozenset({
    M.CHEST, M.ABS, M.BICEPS, M.QUADS, M.SHOULDERS_FRONT,
})


def view_of(muscle: MuscleGroup) -> BodyView:
    return BodyView.FRONT if muscle in FRONT_MUSCLES else BodyView.BACK


class RankedMuscle(BaseModel):
    muscle: MuscleGroup
    display_name: str
    intensity: float = Field(..., ge=0.0, le=1.0)
    percentage: int = Field(..., ge=0, le=100)


def rank_for_view(intensities: MuscleEngagementMap, view: BodyView) -> list[RankedMuscle]:
    """Engaged muscles of *view*, most intense first.

    Muscles at 0.0 are left out.  Ties are ordered by muscle name so the
    list is stable.

    Raises:
        ValueError: *intensities* has not been normalized.
    """
    if not intensities.is_normalized:
        raise ValueError("rank_for_view expects normalized intensities")

    ranked = [
        RankedMuscle(
            muscle=muscle,
            display_name=MUSCLE_DISPLAY_NAMES[muscle],
            intensity=value,
            percentage=round(value * 100),
        )
        for muscle, value in intensities.engagement.items()
        if value > 0.0 and view_of(muscle) is view
    ]
    ranked.sort(key=lambda r: (-r.intensity, r.muscle.value))
    return ranked
